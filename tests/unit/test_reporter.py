"""Unit tests for run event logging"""

import logging

from image_migrator.enum import RowStatus, RunStatus
from image_migrator.exception import FetchError, InsertError
from image_migrator.migrator import RowOutcome, RunReport
from image_migrator.reporter import RunReporter


def test_success_row_logs_info(caplog) -> None:
    caplog.set_level(logging.INFO, logger="image_migrator")

    RunReporter().row_finished(RowOutcome("abc", RowStatus.SUCCESS))

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.identifier == "abc"
    assert record.event == "row_succeeded"


def test_fetch_failure_logs_cause(caplog) -> None:
    caplog.set_level(logging.INFO, logger="image_migrator")
    error = FetchError("failed to fetch image: refused", reason=FetchError.TRANSPORT, url="u")

    RunReporter().row_finished(RowOutcome.failed("abc", RowStatus.FETCH_FAILED, error))

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.event == "fetch_failed"
    assert "identifier=abc" in record.getMessage()
    assert "refused" in record.getMessage()


def test_insert_failure_logs_cause(caplog) -> None:
    caplog.set_level(logging.INFO, logger="image_migrator")
    error = InsertError("database cannot store the image: disk full")

    RunReporter().row_finished(RowOutcome.failed("abc", RowStatus.INSERT_FAILED, error))

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.event == "insert_failed"
    assert "disk full" in record.getMessage()


def test_run_finished_logs_totals(caplog) -> None:
    caplog.set_level(logging.INFO, logger="image_migrator")
    report = RunReport(status=RunStatus.DONE, pages=3, succeeded=5, fetch_failed=1)

    RunReporter().run_finished(report)

    message = caplog.records[-1].getMessage()
    assert "pages=3" in message
    assert "succeeded=5" in message
    assert "fetch_failed=1" in message


def test_run_aborted_logs_error(caplog) -> None:
    caplog.set_level(logging.INFO, logger="image_migrator")
    report = RunReport(
        status=RunStatus.FATAL_ABORTED,
        error_code="PAGE_READ_ERROR",
        error_message="timeout",
        failed_page=4,
    )

    RunReporter().run_finished(report)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.batch == 4
    assert "timeout" in record.getMessage()
