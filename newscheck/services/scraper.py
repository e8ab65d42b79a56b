import logging
from time import monotonic
from urllib.parse import urlparse

import requests
from urllib3.exceptions import ReadTimeoutError

from newscheck.errors import FetchError, FetchTimeout, InvalidURL

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 10  # seconds, single attempt, whole request
CHUNK_SIZE = 8192

BROWSER_HEADERS = {
    # Pretend to be a browser so naive bot filters let us through
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

NON_SUCCESS_MESSAGE = "Failed to fetch content from URL"


def validate_url(url: str) -> str:
    """Return the hostname of an absolute URL or raise InvalidURL."""
    try:
        parsed = urlparse((url or "").strip())
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidURL() from e
    if not parsed.scheme or not parsed.netloc or not hostname:
        raise InvalidURL()
    return hostname


def _decode(body: bytes, encoding) -> str:
    try:
        return body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


class Scraper:
    @staticmethod
    def fetch(url: str, timeout: float = FETCH_TIMEOUT) -> str:
        """
        Fetch raw markup with one GET request.
        The timeout bounds the whole request, body download included.
        Raises InvalidURL, FetchTimeout or FetchError; never retries.
        """
        validate_url(url)
        deadline = monotonic() + timeout
        try:
            with requests.get(url.strip(), timeout=timeout, headers=BROWSER_HEADERS, stream=True) as resp:
                if not 200 <= resp.status_code < 300:
                    logger.warning("fetch %s answered %s", url, resp.status_code)
                    raise FetchError(NON_SUCCESS_MESSAGE, upstream_status=resp.status_code)

                chunks = []
                for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                    if monotonic() > deadline:
                        raise FetchTimeout()
                    chunks.append(chunk)
                return _decode(b"".join(chunks), resp.encoding)
        except FetchTimeout:
            logger.warning("fetch %s exceeded %ss", url, timeout)
            raise
        except requests.exceptions.Timeout as e:
            logger.warning("fetch %s timed out after %ss", url, timeout)
            raise FetchTimeout() from e
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema) as e:
            raise InvalidURL() from e
        except requests.exceptions.RequestException as e:
            # a read timeout while streaming surfaces as ConnectionError
            if e.args and isinstance(e.args[0], ReadTimeoutError):
                logger.warning("fetch %s timed out after %ss", url, timeout)
                raise FetchTimeout() from e
            logger.warning("fetch %s failed: %s", url, str(e)[:200])
            raise FetchError() from e
