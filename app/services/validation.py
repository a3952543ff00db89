"""Path parameter validation shared by every router."""

from app.exceptions import ValidationError
from app.schemas.fields import MAX_INT

INVALID_ID_MESSAGE = "ID inválido"


def parse_id(raw: str) -> int:
    """
    Parse a path id. Only plain decimal digits naming a positive integer that
    fits the int4 primary keys are accepted ("12"); anything else ("abc",
    "-1", "0", "1.5", "", "99999999999") is rejected.
    """
    if not raw or not raw.isascii() or not raw.isdigit():
        raise ValidationError(INVALID_ID_MESSAGE)
    value = int(raw)
    if value <= 0 or value > MAX_INT:
        raise ValidationError(INVALID_ID_MESSAGE)
    return value
