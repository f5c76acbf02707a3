"""
Helper functions for the League Dashboard backend

Contains query input parsing and lineup ordering shared by the formatters.
"""
import re
from typing import Union

from constants import DEFAULT_SLOT_PRIORITY, NON_STARTER_SLOTS, SLOT_PRIORITY
from exceptions import ValidationException
from models.division import Division

_TEAM_ID_PATTERN = re.compile(r'^\d+$')


def parse_division(token: Union[str, Division]) -> Division:
    """
    Validate a division token.

    Args:
        token: Exactly 'green' or 'white' (or a Division)

    Returns:
        Division enum member

    Raises:
        ValidationException: For any other value
    """
    if isinstance(token, Division):
        return token
    try:
        return Division(token)
    except ValueError:
        raise ValidationException("Invalid division")


def parse_team_id(value: Union[str, int]) -> int:
    """
    Parse a team id from route or caller input.

    Args:
        value: Integer or a string of digits

    Returns:
        Team id as int

    Raises:
        ValidationException: For non-numeric, negative or boolean input
    """
    if isinstance(value, bool):
        raise ValidationException(f"Invalid team id: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValidationException(f"Invalid team id: {value}")
        return value
    if isinstance(value, str) and _TEAM_ID_PATTERN.match(value.strip()):
        return int(value.strip())
    raise ValidationException(f"Invalid team id: {value!r}")


def slot_priority(slot: str) -> int:
    """Display rank of a rostered slot; unknown slots rank with the bench."""
    return SLOT_PRIORITY.get(slot, DEFAULT_SLOT_PRIORITY)


def is_starting_slot(slot: str) -> bool:
    """Every slot except Bench and IR is part of the starting lineup."""
    return slot not in NON_STARTER_SLOTS
