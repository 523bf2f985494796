"""Amount parsing utilities."""

import math
import re
from typing import Union


def parse_amount(amount: Union[str, int, float]) -> float:
    """Parse a raw amount into a float.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "-123.45"

    Numbers are passed through. The sign is not checked here; callers decide
    whether negative or zero amounts are acceptable.

    Args:
        amount: Amount string or number

    Returns:
        Float amount

    Raises:
        ValueError: If the amount cannot be parsed or is not finite
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount {amount!r}")

    if isinstance(amount, (int, float)):
        value = float(amount)
    else:
        if amount is None or not str(amount).strip():
            raise ValueError("Empty amount string")

        # Remove whitespace
        amount_str = str(amount).strip()

        # Remove currency symbols
        amount_str = re.sub(r"[$€£¥]", "", amount_str)

        # Remove commas
        amount_str = amount_str.replace(",", "").strip()

        try:
            value = float(amount_str)
        except ValueError as e:
            raise ValueError(f"Could not parse amount '{amount_str}': {e}") from e

    if not math.isfinite(value):
        raise ValueError(f"Amount must be a finite number, got {value}")
    return value
