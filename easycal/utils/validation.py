"""
Validation utilities for booking form input
"""
import re
from typing import Any, Dict, Optional

from easycal.constants import (
    DATE_PATTERN,
    PHONE_PATTERN,
    TIME_PATTERN,
    WIZARD_STEP_CLIENT,
    WIZARD_STEP_DATETIME,
    WIZARD_STEP_SERVICE,
)

_WHITESPACE_RE = re.compile(r"\s")


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def can_proceed(step: int, form_data: Dict[str, Any]) -> bool:
    """
    Checks whether the booking wizard may move past the given step.

    Args:
        step: Current step number (1, 2 or 3)
        form_data: Wizard state with client_name, client_phone,
            selected_service, selected_date and selected_time

    Returns:
        bool: True if the step is complete, False for unknown steps
    """
    if step == WIZARD_STEP_CLIENT:
        return _has_text(form_data.get("client_name")) and _has_text(form_data.get("client_phone"))
    if step == WIZARD_STEP_SERVICE:
        return form_data.get("selected_service") is not None
    if step == WIZARD_STEP_DATETIME:
        return bool(form_data.get("selected_date") and form_data.get("selected_time"))
    return False


def is_valid_phone(phone: Optional[str]) -> bool:
    """
    Checks an Israeli mobile number.

    Accepts 05X-XXXXXXX and 05XXXXXXXX, whitespace anywhere is ignored.

    Args:
        phone: Phone number as typed by the client

    Returns:
        bool: True if the number is a valid mobile number
    """
    if not phone or not isinstance(phone, str):
        return False

    return bool(re.match(PHONE_PATTERN, _WHITESPACE_RE.sub("", phone)))


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """
    Brings a valid mobile number to the 05X-XXXXXXX form.

    Returns:
        Optional[str]: Normalized number or None if the number is invalid
    """
    if not is_valid_phone(phone):
        return None

    digits = _WHITESPACE_RE.sub("", phone).replace("-", "")
    return f"{digits[:3]}-{digits[3:]}"


def validate_time_format(time_str: str) -> bool:
    """
    Checks the HH:MM time format.

    Args:
        time_str: Time as a string

    Returns:
        bool: True if the format is correct
    """
    if not time_str or not isinstance(time_str, str):
        return False

    return bool(re.match(TIME_PATTERN, time_str))


def validate_date_format(date_str: str) -> bool:
    """
    Checks the YYYY-MM-DD date format.

    Args:
        date_str: Date as a string

    Returns:
        bool: True if the format is correct
    """
    if not date_str or not isinstance(date_str, str):
        return False

    return bool(re.match(DATE_PATTERN, date_str))
