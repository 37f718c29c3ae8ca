"""CSV source for order events.

The trades file has no header row; every line is
    time,companyName,orderType,quantity
e.g. ``2015-02-28 07:58:14,Bank of Mars,D,140000``. Quantities may be
fractional (``100.5``) but never negative.

Loading is all-or-nothing: an unreadable file or a single malformed row
raises LedgerLoadError and no events are returned.
"""

import csv
import logging
from collections.abc import Iterable, Iterator
from decimal import Decimal, InvalidOperation
from pathlib import Path

from src.ec_common.datetime_utils import parse_event_time
from src.ec_common.errors import LedgerLoadError, MalformedRecordError
from src.ec_ledger.domain.models import OrderEvent

logger = logging.getLogger(__name__)

COLUMNS = ("time", "companyName", "orderType", "quantity")


def _parse_quantity(raw: str, line_number: int) -> Decimal:
    try:
        quantity = Decimal(raw)
    except InvalidOperation:
        raise MalformedRecordError(line_number, f"quantity {raw!r} is not a number") from None
    if not quantity.is_finite():
        raise MalformedRecordError(line_number, f"quantity {raw!r} is not a number")
    if quantity < 0:
        raise MalformedRecordError(line_number, f"quantity {quantity} is negative")
    return quantity


def parse_rows(rows: Iterable[list[str]]) -> Iterator[OrderEvent]:
    """Normalise raw CSV rows into OrderEvents. Blank lines are skipped.

    Timestamps must either all carry a UTC offset or all omit one, so that
    any two events in the file can be compared.
    """
    offset_aware: bool | None = None
    for line_number, row in enumerate(rows, start=1):
        if not row or all(not cell.strip() for cell in row):
            continue
        if len(row) != len(COLUMNS):
            raise MalformedRecordError(
                line_number, f"expected {len(COLUMNS)} columns, got {len(row)}"
            )
        raw_time, company_name, order_type, raw_quantity = (cell.strip() for cell in row)
        try:
            time = parse_event_time(raw_time)
        except ValueError:
            raise MalformedRecordError(line_number, f"invalid time {raw_time!r}") from None

        aware = time.tzinfo is not None
        if offset_aware is None:
            offset_aware = aware
        elif aware != offset_aware:
            raise MalformedRecordError(
                line_number,
                f"time {raw_time!r} mixes offset-aware and naive timestamps",
            )

        yield OrderEvent(
            time=time,
            company_name=company_name,
            order_type=order_type,
            quantity=_parse_quantity(raw_quantity, line_number),
        )


def read_order_events(path: str | Path) -> list[OrderEvent]:
    """Read every event from the CSV at ``path``, in file order."""
    file_path = Path(path)
    try:
        with file_path.open(newline="", encoding="utf-8") as f:
            events = list(parse_rows(csv.reader(f)))
    except OSError as exc:
        raise LedgerLoadError(f"cannot read {file_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LedgerLoadError(f"{file_path} is not valid UTF-8") from exc

    logger.info("Loaded %d order events from %s", len(events), file_path)
    return events
