from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path
from fastapi.responses import PlainTextResponse

from vwaper.config import get_settings
from vwaper.models.report import RecordIn, Report
from vwaper.report.builder import build_report
from vwaper.report.render import render_text
from vwaper.state import market

router = APIRouter()

# Handlers are async so they all run on the event loop thread:
# records are ingested strictly one at a time.


def _summary(symbol: str) -> dict:
    aggregate = market.lookup(symbol)
    if aggregate is None:
        raise HTTPException(status_code=404, detail=f"Stock '{symbol}' not found")

    return {
        "symbol": aggregate.symbol,
        "total_volume": aggregate.total_volume,
        "max_high": aggregate.max_high,
        "min_low": aggregate.min_low,
        "intervals": {str(i): v for i, v in sorted(aggregate.interval_volume.items())},
    }


@router.post("/records")
async def ingest_record(record: RecordIn):
    """
    Feeds ONE record into the process-wide market.
    """
    created = not market.contains(record.symbol)
    market.ingest(record.symbol, record.interval, record.volume, record.high, record.low)
    return {
        "ok": True,
        "created": created,
        "stocks": len(market),
        "max_interval": market.max_interval_seen(),
    }


@router.get("/stocks/{symbol}")
async def stock_summary(symbol: str = Path(..., description="Stock symbol, e.g., VOD.L")):
    return _summary(symbol)


@router.get("/report", response_model=Report)
async def report():
    """
    Report v1:
    - volume % per stock per interval (interval-major, first-seen stock order)
    - max high / min low per stock
    """
    return build_report(market, delimiter=get_settings().delimiter)


@router.get("/report.txt", response_class=PlainTextResponse)
async def report_text():
    return render_text(build_report(market, delimiter=get_settings().delimiter))
