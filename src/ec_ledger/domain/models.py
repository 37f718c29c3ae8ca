"""Order event domain model — pure dataclass, no I/O."""
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.ec_common.enums import OrderType


@dataclass(frozen=True)
class OrderEvent:
    time: datetime
    company_name: str
    order_type: str  # D (new) / F (cancel); other codes are carried but ignored
    quantity: Decimal  # non-negative, may be fractional

    @property
    def is_new(self) -> bool:
        return self.order_type == OrderType.NEW

    @property
    def is_cancel(self) -> bool:
        return self.order_type == OrderType.CANCEL


# One company's events, time ascending (source order).
CompanyLedger = tuple[OrderEvent, ...]

# company_name -> CompanyLedger, read-only once built.
LedgerBook = Mapping[str, CompanyLedger]
