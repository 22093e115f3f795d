"""
Image Fetcher

Responsibilities:
- Build the download URL of a legacy image
- Download the full image body with httpx
- Convert transport, status and body-read failures into FetchError
- Release the connection on every exit path

Only GET is used and only 200 OK counts as success.
"""

from typing import Optional
import httpx
from .exception import FetchError
from .logging import get_logger

logger = get_logger(__name__)


def build_image_url(base_url: str, relative_path: str, file_name: str) -> str:
    """Build the download URL for a legacy image

    Args:
        base_url: Image host base, e.g. "https://pic.example.com/i"
        relative_path: Stored relative directory
        file_name: Stored file name

    Returns:
        "{base_url}/{relative_path}/{file_name}"
    """
    return f"{base_url.rstrip('/')}/{relative_path}/{file_name}"


class ImageFetcher:
    """
    Synchronous image downloader.

    The response is opened in streaming mode inside a ``with`` block so the
    connection goes back to the pool whether the download succeeds, gets a
    bad status or breaks while the body is read.

    Args:
        timeout: Request timeout in seconds (ignored if client is given)
        client: Optional pre-built httpx.Client; the caller keeps ownership
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout)

    def fetch(self, url: str) -> bytes:
        """
        Download an image.

        Args:
            url: Absolute image URL

        Returns:
            Full response body

        Raises:
            FetchError: With reason ``transport``, ``status`` or ``body``
        """
        try:
            with self.client.stream("GET", url) as response:
                if response.status_code != httpx.codes.OK:
                    logger.debug(f"Bad status {response.status_code} for {url}")
                    raise FetchError(
                        f"bad status: {response.status_code} {response.reason_phrase}",
                        reason=FetchError.STATUS,
                        url=url,
                        status_code=response.status_code,
                    )
                try:
                    return response.read()
                except (httpx.HTTPError, httpx.StreamError) as e:
                    raise FetchError(
                        f"failed to read image data: {e}",
                        reason=FetchError.BODY,
                        url=url,
                        status_code=response.status_code,
                    ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(
                f"failed to fetch image: {e}",
                reason=FetchError.TRANSPORT,
                url=url,
            ) from e

    def close(self):
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
