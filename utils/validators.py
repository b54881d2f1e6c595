"""
Input validators shared by the request handlers and the stores.
"""

from __future__ import annotations

from typing import Optional

from utils.errors import InvalidInput


def is_blank(value: Optional[str]) -> bool:
    """True for ``None``, ``""`` and whitespace-only strings."""
    return value is None or not str(value).strip()


def require_fields(*values: Optional[str], message: str = "Missing fields") -> None:
    """Raise ``InvalidInput`` if any value is missing or empty."""
    for value in values:
        if not value:
            raise InvalidInput(message)


def require_text(text: Optional[str], message: str) -> str:
    """Return *text* unchanged, or raise ``InvalidInput`` when blank."""
    if is_blank(text):
        raise InvalidInput(message)
    return text
