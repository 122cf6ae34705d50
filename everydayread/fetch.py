"""Downloading text documents over HTTP (or any scheme urllib understands)."""

from __future__ import annotations

import urllib.error
import urllib.request

__all__ = ["FetchError", "fetch_text", "decode_utf8"]


class FetchError(Exception):
    """Raised when a document cannot be retrieved."""

    def __init__(self, message: str, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


def decode_utf8(data: bytes | bytearray) -> str:
    """Decode UTF-8 bytes into text, raising UnicodeDecodeError on bad input."""
    return bytes(data).decode("utf-8")


def fetch_text(url: str, timeout: float = 10.0) -> str:
    """Fetch ``url`` and return its body decoded as UTF-8 text."""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            payload = response.read()
    except urllib.error.HTTPError as exc:
        try:
            body = exc.read().decode("utf-8", errors="replace")
        except OSError:
            body = ""
        raise FetchError(f"HTTP {exc.code} while fetching {url}", status=exc.code, body=body) from exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise FetchError(f"failed to fetch {url}: {exc}") from exc
    return decode_utf8(payload)