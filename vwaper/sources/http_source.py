from __future__ import annotations

import logging
from typing import Iterator, Optional

import httpx

from vwaper.models.market import Record
from vwaper.sources.base import RecordSource, parse_lines

log = logging.getLogger("http_source")


class HttpSource(RecordSource):
    """
    Fetches a market file over HTTP(S) and parses its body.

    Non-2xx responses and transport errors propagate as httpx errors.
    """

    def __init__(self, url: str, timeout: float = 20.0, client: Optional[httpx.Client] = None):
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def iter_records(self) -> Iterator[Record]:
        r = self._client.get(self.url)
        r.raise_for_status()
        log.info("Fetched market data url=%s bytes=%d", self.url, len(r.content))
        yield from parse_lines(r.text.splitlines())

    def describe(self) -> str:
        return f"http:{self.url}"
