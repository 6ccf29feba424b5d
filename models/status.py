# -*- coding: utf-8 -*-
"""
Record status codes shared by every entity.
"""

from typing import Any, Optional

STATUS_ACTIVE = 1
STATUS_INACTIVE = 2


def parse_int(value: Any) -> Optional[int]:
    """Coerce an API/form value to int, keeping None for blanks and junk."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def is_active(status: Any) -> bool:
    """1 is active; every other value is inactive."""
    return parse_int(status) == STATUS_ACTIVE
