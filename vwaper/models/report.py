from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class PercentageRow(BaseModel):
    """Share of a stock's total volume traded during one interval (0-100)."""

    symbol: str
    interval: int
    percentage: float


class HighLowRow(BaseModel):
    symbol: str
    max_high: float
    min_low: float


class Report(BaseModel):
    """
    Final report over a finished market.

    percentages:
      interval-major rows (every stock for interval 1, then interval 2, ...)

    delimiter:
      marker emitted once between the two tables

    high_low:
      one row per stock, first-seen order
    """

    percentages: List[PercentageRow] = []
    delimiter: str = "#"
    high_low: List[HighLowRow] = []


class RecordIn(BaseModel):
    """API payload for a single record."""

    symbol: str = Field(..., min_length=1)
    interval: int = Field(..., ge=1)
    volume: int = Field(..., ge=0)
    high: float = Field(..., allow_inf_nan=False)
    low: float = Field(..., allow_inf_nan=False)
