"""Custom exceptions for the image migrator"""


class MigrationException(Exception):
    """Base exception for all migration errors

    Attributes:
        message: Human-readable error message
        code: Error code used in log lines and reports
    """

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(message)


class PageReadError(MigrationException):
    """Reading a page from the legacy store failed

    Fatal to the run: no row of the failed page is processed and no
    further page is requested.
    """

    def __init__(self, message: str):
        super().__init__(message, "PAGE_READ_ERROR")


class FetchError(MigrationException):
    """Downloading one image failed

    Row-scoped. ``reason`` tells the failure kinds apart:

    - ``transport``: connection could not be made or broke before a response
    - ``status``: the server answered with a non-200 status
    - ``body``: the response body could not be read
    """

    TRANSPORT = "transport"
    STATUS = "status"
    BODY = "body"

    def __init__(
        self,
        message: str,
        reason: str,
        url: str,
        status_code: int | None = None,
    ):
        super().__init__(message, "FETCH_ERROR")
        self.reason = reason
        self.url = url
        self.status_code = status_code


class InsertError(MigrationException):
    """Writing one record to the destination store failed (row-scoped)"""

    def __init__(self, message: str):
        super().__init__(message, "INSERT_ERROR")


class ConfigurationError(MigrationException):
    """Invalid or missing configuration"""

    def __init__(self, message: str):
        super().__init__(message, "CONFIG_ERROR")
