"""In-memory stand-ins for the stores and the fetcher"""

from datetime import datetime, timedelta
from typing import Iterable, Optional

import httpx

from image_migrator.exception import FetchError, InsertError, PageReadError
from image_migrator.model import Image, LegacyImage
from image_migrator.store import Page

BASE_URL = "https://pic.example.com/i"
CREATED_AT = datetime(2024, 9, 24, 10, 30, 15, 123456)


def legacy_image(
    id: int,
    name: str | None = None,
    path: str = "2024/09/24",
    origin_name: str | None = None,
) -> LegacyImage:
    return LegacyImage(
        id=id,
        path=path,
        name=name or f"img{id}.png",
        origin_name=origin_name or f"holiday-{id}.png",
        created_at=CREATED_AT + timedelta(minutes=id),
        updated_at=CREATED_AT + timedelta(days=1, minutes=id),
    )


def payload_for(url: str) -> bytes:
    return b"\x89PNG\r\n\x1a\n" + url.encode()


class FakeSource:
    """Keyset-paged list of legacy records

    Fails with PageReadError on the ``fail_on_call``-th read (1-based).
    """

    def __init__(self, records: Iterable[LegacyImage], fail_on_call: Optional[int] = None):
        self.records = sorted(records, key=lambda record: record.id)
        self.fail_on_call = fail_on_call
        self.calls: list[tuple[Optional[int], int]] = []

    def next_page(self, after: Optional[int], page_size: int) -> Page:
        self.calls.append((after, page_size))
        if self.fail_on_call == len(self.calls):
            raise PageReadError("lost connection to legacy database")
        remaining = [
            record for record in self.records
            if after is None or record.id > after
        ]
        return Page(
            records=remaining[:page_size],
            has_more=len(remaining) > page_size,
        )


class FakeDestination:
    """Collects inserted records; rejects the listed identifiers"""

    def __init__(self, fail_identifiers: Iterable[str] = ()):
        self.fail_identifiers = set(fail_identifiers)
        self.inserted: list[Image] = []

    def insert(self, record: Image) -> None:
        if record.image_identifier in self.fail_identifiers:
            raise InsertError("UNIQUE constraint failed: image.image_identifier")
        self.inserted.append(record)


class FakeFetcher:
    """Returns payload_for(url); answers 404 for the listed file names"""

    def __init__(self, missing_names: Iterable[str] = ()):
        self.missing_names = set(missing_names)
        self.urls: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if url.rsplit("/", 1)[-1] in self.missing_names:
            raise FetchError(
                "bad status: 404 Not Found",
                reason=FetchError.STATUS,
                url=url,
                status_code=404,
            )
        return payload_for(url)


class TrackingStream(httpx.SyncByteStream):
    """Response body that records whether it was closed"""

    def __init__(self, chunks: list[bytes], error: Exception | None = None):
        self.chunks = chunks
        self.error = error
        self.closed = False

    def __iter__(self):
        yield from self.chunks
        if self.error is not None:
            raise self.error

    def close(self) -> None:
        self.closed = True
