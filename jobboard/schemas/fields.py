from decimal import Decimal
from pydantic import BeforeValidator
from typing import Annotated, Optional

# "0", "0.05" or ".5"; equity is a fraction below 1
EQUITY_PATTERN = r"^(0|0?\.[0-9]+)$"

# Upper bound of an INTEGER column
MAX_INT = 2147483647


def format_equity(value) -> Optional[str]:
    """Render a stored equity number the way clients send it ("0.05")."""
    if value is None or isinstance(value, str):
        return value
    return format(Decimal(str(value)).normalize(), "f")


StoredEquity = Annotated[Optional[str], BeforeValidator(format_equity)]
