from typing import Optional

from vwaper.config import Settings, get_settings
from vwaper.sources.base import RecordSource
from vwaper.sources.file_source import FileSource
from vwaper.sources.http_source import HttpSource


def get_source(settings: Optional[Settings] = None) -> RecordSource:
    """
    Source loader / factory.

    Reads VWAPER_SOURCE from config and returns an instance of the selected source.
    This is the single place that knows about concrete sources.
    """
    settings = settings or get_settings()
    source_name = settings.source.strip().upper()

    if source_name == "FILE":
        return FileSource(settings.input_path)

    if source_name == "HTTP":
        return HttpSource(settings.input_url, timeout=settings.http_timeout_seconds)

    raise ValueError(f"Unknown VWAPER_SOURCE='{settings.source}'. Expected: FILE or HTTP")
