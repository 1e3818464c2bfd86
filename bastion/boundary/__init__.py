"""
Boundary layer for external systems (AWS APIs).
"""
