"""Groups order events into per-company ledgers."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from types import MappingProxyType

from src.ec_ledger.domain.models import LedgerBook, OrderEvent

logger = logging.getLogger(__name__)


def build_ledgers(events: Iterable[OrderEvent]) -> LedgerBook:
    """Partition events by company, keeping source order within each company.

    Companies appear in first-seen order. The result is read-only and can be
    shared by any number of evaluations.
    """
    grouped: dict[str, list[OrderEvent]] = defaultdict(list)
    for event in events:
        grouped[event.company_name].append(event)

    ledgers = {name: tuple(company_events) for name, company_events in grouped.items()}
    logger.debug("Built ledgers for %d companies", len(ledgers))
    return MappingProxyType(ledgers)
