from __future__ import annotations

import re
from typing import Optional, Tuple

from .constants import FORM_QUESTIONS, REQUIRED_MSG, URL_MSG
from .types import FieldName

URL_RE = re.compile(r"^https?://.+")

_REQUIRED = {q.field: q.required for q in FORM_QUESTIONS}


def _is_empty(v: Optional[str]) -> bool:
    return (v is None) or (v.strip() == "")


def validate_field(field_name: FieldName, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Returns (ok, error_message).

    - required + empty/whitespace => "This field is required"
    - website_link: empty passes, otherwise must start with http:// or https://
    """
    if field_name not in _REQUIRED:
        raise KeyError(f"Unknown form field: {field_name}")

    if _REQUIRED[field_name] and _is_empty(value):
        return False, REQUIRED_MSG

    if field_name == "website_link" and value and not URL_RE.match(value):
        return False, URL_MSG

    return True, None
