"""Progress and error log lines for a migration run"""
from typing import TYPE_CHECKING

from .enum import RowStatus, RunStatus
from .logging import get_logger

if TYPE_CHECKING:
    from .migrator import RowOutcome, RunReport

logger = get_logger(__name__)


class RunReporter:
    """Writes one log line per run event

    Every line carries ``event`` (and ``identifier`` for row events) as
    record attributes besides the message text. Failed rows produce
    exactly one ERROR line each. Nothing here affects the run.
    """

    def page_started(self, index: int, size: int) -> None:
        logger.info(
            f"Processing batch: batch={index}, size={size}",
            extra={"event": "page_started", "batch": index},
        )

    def download_started(self, identifier: str, url: str) -> None:
        logger.info(
            f"Downloading image: identifier={identifier}, url={url}",
            extra={"event": "download_started", "identifier": identifier},
        )

    def downloaded(self, identifier: str, size: int) -> None:
        logger.debug(
            f"Image downloaded successfully: identifier={identifier}, bytes={size}",
            extra={"event": "downloaded", "identifier": identifier},
        )

    def row_finished(self, outcome: "RowOutcome") -> None:
        identifier = outcome.identifier
        if outcome.status == RowStatus.SUCCESS:
            logger.info(
                f"Image stored in database successfully: identifier={identifier}",
                extra={"event": "row_succeeded", "identifier": identifier},
            )
        elif outcome.status == RowStatus.FETCH_FAILED:
            logger.error(
                f"Error downloading image: identifier={identifier}, "
                f"reason={outcome.reason}, err={outcome.message}",
                extra={"event": "fetch_failed", "identifier": identifier},
            )
        else:
            logger.error(
                f"Error storing image in database: identifier={identifier}, "
                f"err={outcome.message}",
                extra={"event": "insert_failed", "identifier": identifier},
            )

    def run_finished(self, report: "RunReport") -> None:
        if report.status == RunStatus.FATAL_ABORTED:
            logger.error(
                f"Error processing batches: batch={report.failed_page}, "
                f"err={report.error_message}",
                extra={"event": "run_aborted", "batch": report.failed_page},
            )
            return
        logger.info(
            f"All batches processed successfully: pages={report.pages}, "
            f"succeeded={report.succeeded}, fetch_failed={report.fetch_failed}, "
            f"insert_failed={report.insert_failed}",
            extra={"event": "run_done"},
        )
