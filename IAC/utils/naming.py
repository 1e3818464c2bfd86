"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'bastion-sg')

        Returns:
            Formatted resource name
        """
        if not resource:
            return f"{self.project}-{self.environment}"
        return f"{self.project}-{self.environment}-{resource}"

    def db_identifier(self, resource: str) -> str:
        """
        Generate an RDS identifier (lowercase alphanumerics and hyphens only).

        Args:
            resource: Database identifier suffix

        Returns:
            RDS-safe identifier
        """
        return self.name(resource).lower().replace("_", "-")
