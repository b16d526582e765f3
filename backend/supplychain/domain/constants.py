# backend/supplychain/domain/constants.py

"""
Single source for the fixed value sets enforced by CHECK constraints.
"""

from typing import Final, Tuple

LOYALTY_STATUSES: Final[Tuple[str, ...]] = ("Bronze", "Silver", "Gold")
ORDER_STATUSES: Final[Tuple[str, ...]] = ("Pending", "Completed", "Shipped", "Cancelled")
SHIPMENT_STATUSES: Final[Tuple[str, ...]] = ("Pending", "In Transit", "Received", "Cancelled")
MOVEMENT_TYPES: Final[Tuple[str, ...]] = ("Received", "Shipped", "Transferred", "Returned")

DEFAULT_LOYALTY_STATUS: Final[str] = "Bronze"
DEFAULT_ORDER_STATUS: Final[str] = "Pending"
DEFAULT_SHIPMENT_STATUS: Final[str] = "Pending"


def in_list(column: str, values: Tuple[str, ...]) -> str:
    """SQL text for a `column IN ('a','b')` CHECK condition."""
    quoted = ",".join("'" + v.replace("'", "''") + "'" for v in values)
    return f"{column} IN ({quoted})"
