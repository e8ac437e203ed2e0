from __future__ import annotations

from typing import Any
import http.client
import ipaddress
import json
import logging
import urllib.parse
import urllib.request

from .exceptions import DownloadError


MAX_TEXT_RESPONSE_BYTES = 16 * 1024 * 1024

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        timeout_seconds: int = 30,
        max_text_response_bytes: int = MAX_TEXT_RESPONSE_BYTES,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.max_text_response_bytes = max_text_response_bytes
        self.user_agent = "mcclientlib/0.1 (+https://github.com/)"

    def _request(self, url: str) -> urllib.request.Request:
        self._validate_url(url)
        return urllib.request.Request(url, headers={"User-Agent": self.user_agent})

    def get_json(self, url: str) -> Any:
        payload = self.get_text(url)
        try:
            return json.loads(payload)
        except json.JSONDecodeError as exc:
            raise DownloadError(f"Invalid JSON from {url}") from exc

    def get_text(self, url: str) -> str:
        request = self._request(url)
        logger.debug("GET %s", url)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout_seconds) as response:
                return self._read_limited(
                    response,
                    max_bytes=self.max_text_response_bytes,
                    url=url,
                ).decode("utf-8")
        except (OSError, http.client.HTTPException) as exc:
            raise DownloadError(f"Request failed for {url}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise DownloadError(f"Response from {url} is not valid UTF-8.") from exc

    @staticmethod
    def _validate_url(url: str) -> None:
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme.lower() != "https":
            raise DownloadError(f"Blocked URL with unsupported scheme: {url}")
        host = parsed.hostname
        if not host:
            raise DownloadError(f"Blocked URL with missing host: {url}")
        try:
            ip = ipaddress.ip_address(host)
        except ValueError:
            return
        if (
            ip.is_private
            or ip.is_loopback
            or ip.is_link_local
            or ip.is_multicast
            or ip.is_reserved
        ):
            raise DownloadError(f"Blocked URL targeting disallowed address: {url}")

    @staticmethod
    def _read_limited(response, max_bytes: int, url: str) -> bytes:
        chunks: list[bytes] = []
        received = 0
        while True:
            chunk = response.read(1024 * 1024)
            if not chunk:
                break
            received += len(chunk)
            if received > max_bytes:
                raise DownloadError(
                    f"Response from {url} exceeded the allowed size limit."
                )
            chunks.append(chunk)
        return b"".join(chunks)
