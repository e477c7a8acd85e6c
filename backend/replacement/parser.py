from typing import Any, Tuple

from .errors import InvalidCapacityError, InvalidInputError


def parse(raw: Any) -> Tuple[str, ...]:
    """Split a reference string on whitespace; every token is one page id."""
    if not isinstance(raw, str):
        raise InvalidInputError("reference string must be text")
    pages = tuple(raw.split())
    if not pages:
        raise InvalidInputError("reference string must contain at least one page")
    return pages


def parse_capacity(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidCapacityError("frame count must be a positive integer")
    if isinstance(value, str):
        text = value.strip()
        try:
            capacity = int(text, 10)
        except ValueError:
            raise InvalidCapacityError(f"frame count must be a positive integer, got {value!r}")
    elif isinstance(value, int):
        capacity = value
    elif isinstance(value, float) and value.is_integer():
        capacity = int(value)
    else:
        raise InvalidCapacityError(f"frame count must be a positive integer, got {value!r}")

    if capacity <= 0:
        raise InvalidCapacityError(f"frame count must be >= 1, got {capacity}")
    return capacity
