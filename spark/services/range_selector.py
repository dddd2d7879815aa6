"""
Range selection over a day's price records.
"""

from datetime import datetime
from typing import Iterable, Optional, Tuple

from spark.models.price import DailySummary, PriceRecord


def _rank_key(record: PriceRecord) -> int:
    # A missing rank counts as 0 and therefore sorts first.
    return record.rank if record.rank is not None else 0


def select_range(
    records: Iterable[PriceRecord],
) -> Tuple[Optional[PriceRecord], Optional[PriceRecord]]:
    """
    Pick the lowest and highest ranked records.

    Records are stably sorted ascending by rank; the first and last entries are
    returned. Both are None when there are no records.
    """
    ordered = sorted(records, key=_rank_key)
    if not ordered:
        return None, None
    return ordered[0], ordered[-1]


def build_summary(records: Iterable[PriceRecord], as_of: Optional[datetime] = None) -> DailySummary:
    """Wrap the selected range in a DailySummary stamped with `as_of`."""
    lowest, highest = select_range(records)
    return DailySummary(
        as_of=as_of or datetime.now().astimezone(),
        lowest=lowest,
        highest=highest,
    )
