"""Sliding time-window detection of excessive cancellations for one company.

The window is a pair of indices into the company's ledger. Each event is
added to the running totals once, when it becomes the right edge, and
removed once, when the left edge passes it, so a ledger is evaluated in
linear time.

Ordering contract: when the next event would stretch the window beyond
its duration, the ratio is tested on the totals *before* that event is
admitted. Only then is the event admitted and the left edge advanced.

Shrinking: when every event left of the new right edge has expired at
once, the left edge moves all the way to the right edge. It never stays
behind on an event whose quantity was already subtracted, so an expired
event is subtracted exactly once and the totals never go negative.
"""
import logging
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction

from src.ec_ledger.domain.models import CompanyLedger, OrderEvent

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = timedelta(seconds=60)
DEFAULT_MAX_CANCEL_RATIO = Fraction(1, 3)


def exceeds_ratio(cancel_quantity: Decimal, new_quantity: Decimal, max_ratio: Fraction) -> bool:
    """cancel / new > max_ratio, evaluated without dividing.

    new == 0 behaves like an infinite ratio when anything was cancelled and
    like NaN (never greater) when nothing was.
    """
    return cancel_quantity * max_ratio.denominator > new_quantity * max_ratio.numerator


@dataclass
class WindowState:
    """Totals of the events between ``start`` and ``end`` inclusive, split by order type."""

    start: int = 0
    end: int = 0
    new_quantity: Decimal = Decimal(0)
    cancel_quantity: Decimal = Decimal(0)

    def admit(self, event: OrderEvent) -> None:
        if event.is_new:
            self.new_quantity += event.quantity
        elif event.is_cancel:
            self.cancel_quantity += event.quantity

    def evict(self, event: OrderEvent) -> None:
        if event.is_new:
            self.new_quantity -= event.quantity
        elif event.is_cancel:
            self.cancel_quantity -= event.quantity

    def exceeds(self, max_ratio: Fraction) -> bool:
        return exceeds_ratio(self.cancel_quantity, self.new_quantity, max_ratio)


def evaluate(
    ledger: CompanyLedger,
    window: timedelta = DEFAULT_WINDOW,
    max_ratio: Fraction = DEFAULT_MAX_CANCEL_RATIO,
) -> bool:
    """Return True if the company cancelled excessively in some window.

    ``ledger`` must be sorted by time; this is not checked. Events whose
    order type is neither new nor cancel count towards neither total.
    """
    if not ledger:
        return False

    # A lone cancel has nothing to cancel against.
    if len(ledger) == 1:
        return ledger[0].is_cancel

    state = WindowState()
    state.admit(ledger[0])

    while state.end + 1 < len(ledger):
        gap = ledger[state.end + 1].time - ledger[state.start].time
        if gap > window:
            if state.exceeds(max_ratio):
                _log_trip(ledger, state)
                return True

            state.end += 1
            right = ledger[state.end]
            state.admit(right)

            while state.start < state.end and right.time - ledger[state.start].time > window:
                state.evict(ledger[state.start])
                state.start += 1
        else:
            state.end += 1
            state.admit(ledger[state.end])

    if state.exceeds(max_ratio):
        _log_trip(ledger, state)
        return True
    return False


def _log_trip(ledger: CompanyLedger, state: WindowState) -> None:
    logger.debug(
        "Excessive cancellations: company=%s window=[%s, %s] cancel=%s new=%s",
        ledger[state.start].company_name,
        ledger[state.start].time.isoformat(),
        ledger[state.end].time.isoformat(),
        state.cancel_quantity,
        state.new_quantity,
    )
