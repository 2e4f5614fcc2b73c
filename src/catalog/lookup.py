"""
F1 Catalog - Lookups over the seed data.

All functions are pure reads of ``TEAMS`` and ``DRIVERS``.
"""

import re
from typing import Optional, Tuple, Union

from .data import Team, Driver, TEAMS, DRIVERS

# optional whitespace and sign, then either 0x and hex digits or ASCII decimal
# digits; anything after the digits is ignored
_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def list_teams() -> Tuple[Team, ...]:
    """Return every team in stored order."""
    return TEAMS


def list_drivers() -> Tuple[Driver, ...]:
    """Return every driver in stored order."""
    return DRIVERS


def parse_driver_id(raw: str) -> Optional[int]:
    """
    Parse a driver id received as text.

    Reads the leading integer of the string, so "2", " 2", "2abc" and "2.5"
    all give 2. A "0x" prefix switches to hexadecimal ("0x2" gives 2). Only
    ASCII digits count. Returns None if the text does not start with an
    integer.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None

    sign, hex_digits, dec_digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(dec_digits)
    return -value if sign == "-" else value


def find_driver_by_id(driver_id: Union[int, str]) -> Optional[Driver]:
    """
    Find a driver by id.

    Args:
        driver_id: Numeric id, or the raw text taken from a request path

    Returns:
        The first matching Driver, or None when nothing matches. Text that
        cannot be parsed is treated as an id that matches nothing.
    """
    if isinstance(driver_id, str):
        driver_id = parse_driver_id(driver_id)
    if driver_id is None:
        return None

    for driver in DRIVERS:
        if driver.id == driver_id:
            return driver
    return None
