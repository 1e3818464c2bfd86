"""
Storage components for RDS.

Components:
- RdsMysqlComponent: RDS MySQL database reachable from the bastion only
"""

from IAC.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs

__all__ = [
    "RdsMysqlComponent",
    "RdsOutputs",
]
