"""ExcessiveCancellationsChecker — aggregate queries over per-company verdicts."""
import logging
from datetime import timedelta
from fractions import Fraction
from pathlib import Path

from src.ec_common.errors import CompanyNotFoundError
from src.ec_ledger.application.builder import build_ledgers
from src.ec_ledger.domain.models import CompanyLedger, LedgerBook
from src.ec_ledger.infrastructure.csv_reader import read_order_events
from src.ec_surveillance.engine.cancellation_window import (
    DEFAULT_MAX_CANCEL_RATIO,
    DEFAULT_WINDOW,
    evaluate,
)

logger = logging.getLogger(__name__)


class ExcessiveCancellationsChecker:
    """Answers surveillance queries for a ledger book that is loaded up front.

    Every query evaluates each company on its own; nothing is cached between
    calls and the ledger book is never mutated.
    """

    def __init__(
        self,
        ledgers: LedgerBook,
        window: timedelta = DEFAULT_WINDOW,
        max_ratio: Fraction = DEFAULT_MAX_CANCEL_RATIO,
    ) -> None:
        self._ledgers = ledgers
        self._window = window
        self._max_ratio = max_ratio

    @classmethod
    def from_csv(
        cls,
        path: str | Path,
        window: timedelta = DEFAULT_WINDOW,
        max_ratio: Fraction = DEFAULT_MAX_CANCEL_RATIO,
    ) -> "ExcessiveCancellationsChecker":
        """Load and group the trades file. Raises LedgerLoadError on any failure."""
        ledgers = build_ledgers(read_order_events(path))
        return cls(ledgers, window=window, max_ratio=max_ratio)

    @property
    def company_names(self) -> list[str]:
        return list(self._ledgers)

    def ledger_for(self, company_name: str) -> CompanyLedger:
        try:
            return self._ledgers[company_name]
        except KeyError:
            raise CompanyNotFoundError(company_name) from None

    def is_excessive(self, company_name: str) -> bool:
        return evaluate(self.ledger_for(company_name), self._window, self._max_ratio)

    def company_verdicts(self) -> dict[str, bool]:
        """company_name -> excessive?, in ledger order."""
        return {
            name: evaluate(ledger, self._window, self._max_ratio)
            for name, ledger in self._ledgers.items()
        }

    def companies_involved_in_excessive_cancellations(self) -> set[str]:
        flagged = {name for name, excessive in self.company_verdicts().items() if excessive}
        logger.info(
            "%d of %d companies involved in excessive cancellations",
            len(flagged),
            len(self._ledgers),
        )
        return flagged

    def total_number_of_well_behaved_companies(self) -> int:
        well_behaved = sum(1 for excessive in self.company_verdicts().values() if not excessive)
        logger.info("%d of %d companies well behaved", well_behaved, len(self._ledgers))
        return well_behaved
