"""
F1 API - Catalog Module

Static, read-only team and driver records and the lookups served over HTTP.
"""

from .data import Team, Driver, TEAMS, DRIVERS
from .lookup import list_teams, list_drivers, find_driver_by_id, parse_driver_id

__all__ = [
    "Team",
    "Driver",
    "TEAMS",
    "DRIVERS",
    "list_teams",
    "list_drivers",
    "find_driver_by_id",
    "parse_driver_id",
]
