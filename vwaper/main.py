import logging

from fastapi import FastAPI

from vwaper.api.routes import router as api_router
from vwaper.config import get_settings
from vwaper.jobs.ingest import ingest_records
from vwaper.sources.loader import get_source
from vwaper.state import market

settings = get_settings()
log = logging.getLogger("vwaper_api")

app = FastAPI(title="VWAPer API", version="0.1.0")
app.include_router(api_router)


@app.on_event("startup")
async def _startup():
    # Optionally seed the market from the configured source before serving.
    if not settings.preload_source:
        return

    source = get_source(settings)
    try:
        count = ingest_records(source, market)
    finally:
        close = getattr(source, "close", None)
        if callable(close):
            close()
    log.info("Preloaded %d records from %s", count, source.describe())


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "app_env": settings.app_env,
        "source_config": settings.source,
        "stocks": len(market),
        "records": market.record_count,
    }
