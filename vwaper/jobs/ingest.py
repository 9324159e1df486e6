from __future__ import annotations

import logging
from typing import Optional

from vwaper.market.store import Market
from vwaper.sources.base import RecordSource

log = logging.getLogger("ingest")


def ingest_records(source: RecordSource, market: Market) -> int:
    """
    Drain `source` into `market`, one record at a time in arrival order.
    Returns how many records were ingested. Source errors propagate.
    """
    count = 0
    for record in source.iter_records():
        market.ingest_record(record)
        count += 1

    log.info(
        "Ingested source=%s records=%d stocks=%d max_interval=%d",
        source.describe(),
        count,
        len(market),
        market.max_interval_seen(),
    )
    return count


def load_market(source: RecordSource, market: Optional[Market] = None) -> Market:
    market = market if market is not None else Market()
    ingest_records(source, market)
    return market
