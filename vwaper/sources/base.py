from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

from vwaper.models.market import Record

log = logging.getLogger("record_source")


def parse_line(line: str) -> Optional[Record]:
    """
    Parse one `symbol,interval,volume,high,low` line.

    Whitespace-separated fields are accepted too.
    Returns None for blank lines, `#` comments and anything malformed
    (malformed lines are logged, never raised).
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None

    if "," in text:
        parts = [p.strip() for p in text.split(",")]
    else:
        parts = text.split()

    if len(parts) != 5:
        log.error("Error parsing line (expected 5 fields, got %d): %s", len(parts), text)
        return None

    symbol, interval_raw, volume_raw, high_raw, low_raw = parts
    try:
        interval = int(interval_raw)
        volume = int(volume_raw)
        high = float(high_raw)
        low = float(low_raw)
    except ValueError:
        log.error("Error parsing line: %s", text)
        return None

    if not symbol or interval < 1 or volume < 0:
        log.error("Error parsing line (bad symbol/interval/volume): %s", text)
        return None

    if not math.isfinite(high) or not math.isfinite(low):
        log.error("Error parsing line (non-finite price): %s", text)
        return None

    return Record(symbol=symbol, interval=interval, volume=volume, high=high, low=low)


def parse_lines(lines: Iterable[str]) -> Iterator[Record]:
    for line in lines:
        record = parse_line(line)
        if record is not None:
            yield record


class RecordSource(ABC):
    """
    Producer contract (interface).

    Any source must implement:
    - iter_records(): validated records, in arrival order

    Failing to open/read the underlying input is fatal and must raise.
    """

    @abstractmethod
    def iter_records(self) -> Iterator[Record]:
        raise NotImplementedError

    def describe(self) -> str:
        return self.__class__.__name__
