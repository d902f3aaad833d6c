from datetime import date
from typing import Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def is_plausible_email(v: Optional[str]) -> bool:
    """Syntaxe validée par pydantic (email-validator), sans vérification DNS."""
    if not isinstance(v, str) or not v.strip():
        return False
    try:
        _EMAIL_ADAPTER.validate_python(v.strip())
    except ValidationError:
        return False
    return True


def parse_iso_date(v: Optional[str]) -> Optional[date]:
    """'2025-03-14' -> date; formes semaine/basique ('2025-W11-5', '20250314') => None."""
    text = str(v or "").strip()
    try:
        parsed = date.fromisoformat(text)
    except ValueError:
        return None
    # Strictement YYYY-MM-DD
    if parsed.isoformat() != text:
        return None
    return parsed
