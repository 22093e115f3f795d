"""
Batch migration driver

Walks the legacy table page by page. For each record: derive the
identifier, download the image, build the destination record and
insert it. A failed download or insert only skips that record; a
failed page read stops the run.

Everything runs on the calling thread, one record at a time. Only the
current page is held in memory.
"""
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .config import Settings
from .database import make_engine
from .enum import RowStatus, RunStatus
from .exception import FetchError, InsertError, MigrationException, PageReadError
from .fetcher import ImageFetcher, build_image_url
from .identifier import derive_identifier
from .logging import get_logger
from .model import LegacyImage
from .reporter import RunReporter
from .store import (
    ImageDestination,
    LegacyImageSource,
    SqlImageDestination,
    SqlLegacyImageSource,
)
from .translator import to_destination_record

logger = get_logger(__name__)


class Fetcher(Protocol):
    def fetch(self, url: str) -> bytes:
        ...


@dataclass
class RowOutcome:
    """Result of processing one legacy record

    Failures keep only the error code, reason and message. The exception
    itself is not kept: its traceback references the downloaded payload.
    """
    identifier: str
    status: RowStatus
    code: Optional[str] = None
    reason: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def failed(cls, identifier: str, status: RowStatus, error: MigrationException) -> "RowOutcome":
        return cls(
            identifier,
            status,
            code=error.code,
            reason=getattr(error, "reason", None),
            message=error.message,
        )


@dataclass
class PageReport:
    """Outcomes of every record in one page, in page order"""
    index: int
    outcomes: list[RowOutcome] = field(default_factory=list)


@dataclass
class RunReport:
    """Run-level result

    Page reports are folded into counters as they complete; only failed
    row outcomes are kept.
    """
    status: Optional[RunStatus] = None  # set when the run ends
    pages: int = 0
    succeeded: int = 0
    fetch_failed: int = 0
    insert_failed: int = 0
    failures: list[RowOutcome] = field(default_factory=list)
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    failed_page: Optional[int] = None

    @property
    def processed(self) -> int:
        return self.succeeded + self.fetch_failed + self.insert_failed

    def add_page(self, page_report: PageReport) -> None:
        self.pages += 1
        for outcome in page_report.outcomes:
            if outcome.status == RowStatus.SUCCESS:
                self.succeeded += 1
                continue
            if outcome.status == RowStatus.FETCH_FAILED:
                self.fetch_failed += 1
            else:
                self.insert_failed += 1
            self.failures.append(outcome)


class BatchMigrator:
    """
    Migrates legacy images into the destination store.

    Args:
        source: Paged legacy record reader
        destination: Single-row destination writer
        fetcher: Image downloader
        base_url: Image host base URL
        reporter: Log writer for run events
    """

    def __init__(
        self,
        source: LegacyImageSource,
        destination: ImageDestination,
        fetcher: Fetcher,
        base_url: str,
        reporter: Optional[RunReporter] = None,
    ):
        self.source = source
        self.destination = destination
        self.fetcher = fetcher
        self.base_url = base_url
        self.reporter = reporter or RunReporter()

    def run(self, page_size: int) -> RunReport:
        """
        Migrate every legacy record.

        Args:
            page_size: Maximum records per page (positive)

        Returns:
            RunReport in status DONE or FATAL_ABORTED

        Raises:
            ValueError: If page_size is not positive
        """
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")

        report = RunReport()
        after: Optional[int] = None
        index = 0

        while True:
            try:
                page = self.source.next_page(after, page_size)
            except PageReadError as e:
                report.status = RunStatus.FATAL_ABORTED
                report.error_code = e.code
                report.error_message = e.message
                report.failed_page = index + 1
                self.reporter.run_finished(report)
                return report

            if not page.records:
                break

            index += 1
            self.reporter.page_started(index, len(page.records))
            report.add_page(self._process_page(index, page.records))

            if not page.has_more:
                break
            after = page.next_cursor
            # Drop the page before reading the next one
            del page

        report.status = RunStatus.DONE
        self.reporter.run_finished(report)
        return report

    def _process_page(self, index: int, records: list[LegacyImage]) -> PageReport:
        page_report = PageReport(index=index)
        for record in records:
            outcome = self._process_row(record)
            self.reporter.row_finished(outcome)
            page_report.outcomes.append(outcome)
        return page_report

    def _process_row(self, record: LegacyImage) -> RowOutcome:
        identifier, file_type = derive_identifier(record.name)
        url = build_image_url(self.base_url, record.path, record.name)
        self.reporter.download_started(identifier, url)

        try:
            payload = self.fetcher.fetch(url)
        except FetchError as e:
            return RowOutcome.failed(identifier, RowStatus.FETCH_FAILED, e)
        self.reporter.downloaded(identifier, len(payload))

        image = to_destination_record(record, identifier, file_type, payload)
        try:
            self.destination.insert(image)
        except InsertError as e:
            return RowOutcome.failed(identifier, RowStatus.INSERT_FAILED, e)
        return RowOutcome(identifier, RowStatus.SUCCESS)


def run_migration(
    settings: Settings,
    page_size: Optional[int] = None,
    base_url: Optional[str] = None,
) -> RunReport:
    """Run a migration against the configured stores

    Args:
        settings: Loaded settings
        page_size: Override for settings.page_size
        base_url: Override for settings.base_url

    Returns:
        RunReport of the finished run
    """
    source_engine = make_engine(settings.source_database_url, echo=settings.debug)
    destination_engine = make_engine(
        settings.destination_database_url, echo=settings.debug
    )
    page_size = page_size or settings.page_size
    base_url = base_url or settings.base_url
    logger.info(f"Starting migration: page_size={page_size}, base_url={base_url}")

    try:
        with ImageFetcher(timeout=settings.fetch_timeout) as fetcher:
            migrator = BatchMigrator(
                source=SqlLegacyImageSource(source_engine),
                destination=SqlImageDestination(destination_engine),
                fetcher=fetcher,
                base_url=base_url,
            )
            return migrator.run(page_size)
    finally:
        source_engine.dispose()
        destination_engine.dispose()
