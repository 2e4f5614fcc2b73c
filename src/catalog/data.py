"""
F1 Catalog - Seed data.

Teams and drivers are loaded once at import time and never change afterwards.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Team:
    """A constructor with its home base."""
    id: int
    name: str
    base: str


@dataclass(frozen=True)
class Driver:
    """A driver and the name of the team they race for.

    ``team`` is free text and is not checked against ``TEAMS``.
    """
    id: int
    name: str
    team: str


TEAMS: Tuple[Team, ...] = (
    Team(id=1, name="McLaren", base="Woking, United Kingdom"),
    Team(id=2, name="Mercedes", base="Brackley, United Kingdom"),
    Team(id=3, name="Red Bull Racing", base="Milton Keynes, United Kingdom"),
    Team(id=4, name="Ferrari", base="Maranello, Italy"),
    Team(id=5, name="Alpine", base="Enstone, United Kingdom"),
    Team(id=6, name="Aston Martin", base="Silverstone, United Kingdom"),
    Team(id=7, name="Alfa Romeo Racing", base="Hinwil, Switzerland"),
    Team(id=8, name="AlphaTauri", base="Faenza, Italy"),
    Team(id=9, name="Williams", base="Grove, United Kingdom"),
    Team(id=10, name="Haas", base="Kannapolis, United States"),
    Team(id=11, name="Uralkali Haas F1 Team", base="Banbury, United Kingdom"),
    Team(id=12, name="Scuderia Toro Rosso", base="Faenza, Italy"),
)

DRIVERS: Tuple[Driver, ...] = (
    Driver(id=1, name="Max Verstappen", team="Red Bull Racing"),
    Driver(id=2, name="Lewis Hamilton", team="Mercedes"),
    Driver(id=3, name="Lando Norris", team="McLaren"),
)
