from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

from vwaper.models.market import Record
from vwaper.sources.base import RecordSource, parse_lines


class FileSource(RecordSource):
    """Reads records from a local text file, one record per line."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

        if not self.path.is_file():
            raise FileNotFoundError(f"Could not open file: {self.path}")

    def iter_records(self) -> Iterator[Record]:
        with open(self.path, "r", encoding=self.encoding) as f:
            yield from parse_lines(f)

    def describe(self) -> str:
        return f"file:{self.path}"
