import logging
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "sortcheckstyle"

HEADERS = {
    "Accept": "application/xml, text/xml;q=0.9, */*;q=0.5",
}


class FetchError(RuntimeError):
    """Raised when a document cannot be retrieved from its URI."""


def _read_file_uri(uri: str) -> bytes:
    parsed = urlparse(uri)
    if parsed.netloc and parsed.netloc != "localhost":
        raise ValueError(f"Unsupported file URI host '{parsed.netloc}' in '{uri}'")
    path = Path(url2pathname(parsed.path))
    logger.debug(f"Reading {path} for {uri}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise FetchError(f"Cannot read {uri}: {e}") from e


def fetch_document(uri: str,
                   timeout: float = DEFAULT_TIMEOUT,
                   user_agent: str = DEFAULT_USER_AGENT) -> bytes:
    """
    Retrieves the raw bytes of a document.

    Args:
        uri: An ``http``, ``https`` or ``file`` URI.
        timeout: Seconds to wait for the server.
        user_agent: Value of the User-Agent header.

    Returns:
        The response body.

    Raises:
        FetchError: On transport failures or non-2xx responses.
        ValueError: If the URI scheme is not supported.
    """
    scheme = urlparse(uri).scheme.lower()
    if scheme == "file":
        return _read_file_uri(uri)
    if scheme not in ("http", "https"):
        raise ValueError(f"Unsupported URI scheme '{scheme}' in '{uri}'")

    session = requests.Session()
    session.headers.update(HEADERS)
    session.headers["User-Agent"] = user_agent

    logger.info(f"Fetching {uri}...")
    try:
        response = session.get(uri, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as e:
        raise FetchError(f"Server rejected request for {uri}: {e}") from e
    except requests.RequestException as e:
        raise FetchError(f"Cannot fetch {uri}: {e}") from e
    finally:
        session.close()

    logger.debug(f"Received {len(response.content)} bytes from {uri}")
    return response.content
