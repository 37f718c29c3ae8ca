"""Global enums — values match the order-type codes used in the trades file."""

from enum import Enum


class OrderType(str, Enum):
    """Order-flow action. Only these two codes count towards the cancel ratio."""
    NEW = "D"
    CANCEL = "F"
