from __future__ import annotations

import logging
from typing import Iterator, List

from vwaper.market.store import Market
from vwaper.models.market import Aggregate
from vwaper.models.report import HighLowRow, PercentageRow, Report

log = logging.getLogger("report_builder")

DELIMITER = "#"


def volume_percentage(aggregate: Aggregate, interval: int) -> float:
    """
    Percent of the stock's total volume traded in `interval`.

    A stock with zero total volume reports 0.0 for every interval.
    An interval the stock never traded in also reports 0.0.
    """
    lookup = aggregate.volume_at_interval(interval)
    if not lookup.present:
        log.debug("Interval %d not found for stock '%s'", interval, aggregate.symbol)
        return 0.0

    if aggregate.total_volume == 0:
        return 0.0

    return (lookup.volume / aggregate.total_volume) * 100.0


def _aggregates_in_order(market: Market) -> List[Aggregate]:
    aggregates: List[Aggregate] = []
    for symbol in market.symbols_in_order():
        aggregate = market.lookup(symbol)
        if aggregate is not None:
            aggregates.append(aggregate)
    return aggregates


def iter_percentage_rows(market: Market) -> Iterator[PercentageRow]:
    """Interval-major: every stock for interval 1, then every stock for interval 2, ..."""
    aggregates = _aggregates_in_order(market)

    # Every stock is walked over the shared 1..max_interval range.
    for interval in range(1, market.max_interval_seen() + 1):
        for aggregate in aggregates:
            yield PercentageRow(
                symbol=aggregate.symbol,
                interval=interval,
                percentage=volume_percentage(aggregate, interval),
            )


def iter_high_low_rows(market: Market) -> Iterator[HighLowRow]:
    for aggregate in _aggregates_in_order(market):
        yield HighLowRow(
            symbol=aggregate.symbol,
            max_high=aggregate.max_high,
            min_low=aggregate.min_low,
        )


def build_report(market: Market, delimiter: str = DELIMITER) -> Report:
    """Read-only pass over a finished market. Nothing in the market is mutated."""
    report = Report(
        percentages=list(iter_percentage_rows(market)),
        delimiter=delimiter,
        high_low=list(iter_high_low_rows(market)),
    )
    log.info(
        "Built report stocks=%d intervals=%d rows=%d",
        len(report.high_low),
        market.max_interval_seen(),
        len(report.percentages),
    )
    return report
