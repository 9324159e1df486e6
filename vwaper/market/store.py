from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from vwaper.models.market import Aggregate, Record

log = logging.getLogger("market_store")


@dataclass
class Market:
    """
    In-memory registry of per-stock aggregates.

    aggregates[symbol]  -> running stats for that stock
    symbol_order        -> symbols in the order we first saw them
    max_interval        -> highest interval number seen across all stocks

    Reports iterate symbol_order, never the dict, so output order only
    depends on arrival order of each stock's first record.
    """
    aggregates: Dict[str, Aggregate] = field(default_factory=dict)
    symbol_order: List[str] = field(default_factory=list)
    max_interval: int = 0
    record_count: int = 0

    def __len__(self) -> int:
        return len(self.symbol_order)

    def reset(self) -> None:
        """Drop everything (in place, so shared references stay valid)."""
        self.aggregates.clear()
        self.symbol_order.clear()
        self.max_interval = 0
        self.record_count = 0

    def contains(self, symbol: str) -> bool:
        return symbol in self.aggregates

    def lookup(self, symbol: str) -> Optional[Aggregate]:
        """Aggregate for a known stock, or None (logged) if we never saw it."""
        aggregate = self.aggregates.get(symbol)
        if aggregate is None:
            log.warning("Stock '%s' not found in records", symbol)
        return aggregate

    def add(self, symbol: str, interval: int, volume: int, high: float, low: float) -> bool:
        """
        Register a new stock seeded with its first record.
        Returns False (and changes nothing) if the stock already exists.
        """
        if symbol in self.aggregates:
            log.warning("Stock '%s' already exists, not adding it again", symbol)
            return False

        self.aggregates[symbol] = Aggregate.from_record(Record(symbol, interval, volume, high, low))
        self.symbol_order.append(symbol)
        self._observe(interval)
        return True

    def update(self, symbol: str, interval: int, volume: int, high: float, low: float) -> bool:
        """
        Fold a record into an existing stock.
        Returns False (and changes nothing) for an unknown stock.
        """
        aggregate = self.aggregates.get(symbol)
        if aggregate is None:
            log.error("Cannot update non-existent stock '%s'", symbol)
            return False

        aggregate.update(interval, volume, high, low)
        self._observe(interval)
        return True

    def ingest(self, symbol: str, interval: int, volume: int, high: float, low: float) -> Aggregate:
        """Absorb one record: create the stock on first sight, else update it."""
        if symbol in self.aggregates:
            self.update(symbol, interval, volume, high, low)
        else:
            self.add(symbol, interval, volume, high, low)
        return self.aggregates[symbol]

    def ingest_record(self, record: Record) -> Aggregate:
        return self.ingest(record.symbol, record.interval, record.volume, record.high, record.low)

    def symbols_in_order(self) -> List[str]:
        return list(self.symbol_order)

    def max_interval_seen(self) -> int:
        return self.max_interval

    def _observe(self, interval: int) -> None:
        self.record_count += 1
        if interval > self.max_interval:
            self.max_interval = interval
