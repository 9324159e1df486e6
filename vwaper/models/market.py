from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, NamedTuple


@dataclass(frozen=True)
class Record:
    """
    Record = one validated line of trading activity.

    symbol: which stock (e.g., VOD.L)
    interval: time bucket number, starts at 1
    volume: shares traded in that interval (non-negative)
    high/low: price extremes seen in that interval
    """
    symbol: str
    interval: int
    volume: int
    high: float
    low: float


class VolumeLookup(NamedTuple):
    """Result of asking an Aggregate for one interval's volume."""
    volume: int
    present: bool


@dataclass
class Aggregate:
    """
    Running statistics for one stock.

    total_volume: sum of every volume ingested for the stock
    interval_volume: interval -> accumulated volume (only intervals we saw)
    max_high / min_low: extremes across every record for the stock
    """
    symbol: str
    total_volume: int
    max_high: float
    min_low: float
    interval_volume: Dict[int, int] = field(default_factory=dict)

    @classmethod
    def create(cls, symbol: str, interval: int, volume: int, high: float, low: float) -> "Aggregate":
        """Start a new aggregate seeded with exactly one interval entry."""
        return cls(
            symbol=symbol,
            total_volume=volume,
            max_high=high,
            min_low=low,
            interval_volume={interval: volume},
        )

    @classmethod
    def from_record(cls, record: Record) -> "Aggregate":
        return cls.create(record.symbol, record.interval, record.volume, record.high, record.low)

    def update(self, interval: int, volume: int, high: float, low: float) -> None:
        """Fold one more record into this aggregate."""
        self.total_volume += volume
        self.interval_volume[interval] = self.interval_volume.get(interval, 0) + volume
        self.max_high = max(self.max_high, high)
        self.min_low = min(self.min_low, low)

    def volume_at_interval(self, interval: int) -> VolumeLookup:
        volume = self.interval_volume.get(interval)
        if volume is None:
            return VolumeLookup(volume=0, present=False)
        return VolumeLookup(volume=volume, present=True)
