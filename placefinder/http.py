"""HTTP client and per-request metrics."""
from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class UpstreamError(RuntimeError):
    """The place-search provider could not be reached or answered with an error."""


class MissingApiKeyError(UpstreamError):
    pass


@dataclass
class RequestMetrics:
    network_nearby: int = 0
    network_text: int = 0
    failed_text: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def places_count(self) -> int:
        return self.network_nearby + self.network_text

    def inc_network(self, kind: str) -> None:
        with self._lock:
            if kind == "nearby":
                self.network_nearby += 1
            elif kind == "text":
                self.network_text += 1
            else:
                raise ValueError(f"Unknown request kind: {kind}")

    def inc_failed(self, kind: str) -> None:
        with self._lock:
            if kind == "text":
                self.failed_text += 1
            else:
                raise ValueError(f"Unknown request kind: {kind}")

    def as_dict(self) -> Dict[str, int]:
        return {
            "network_nearby": self.network_nearby,
            "network_text": self.network_text,
            "failed_text": self.failed_text,
        }


class HttpClient:
    def __init__(self, api_key: str, timeout: int = 20) -> None:
        if not api_key:
            raise MissingApiKeyError("Server API key missing")
        self.api_key = api_key
        self.timeout = timeout
        self.session = requests.Session()

    def post_json(
        self,
        url: str,
        body: Dict[str, Any],
        field_mask: str,
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """POST once; a non-200 status raises ``requests.HTTPError``."""
        headers = {
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": field_mask,
            "Content-Type": "application/json",
        }
        if extra_headers:
            headers.update(extra_headers)

        resp = self.session.post(url, data=json.dumps(body), headers=headers, timeout=self.timeout)
        if resp.status_code == 200:
            try:
                return resp.json()
            except ValueError:
                logger.error("Non-JSON response from %s", url)
                raise

        logger.error("HTTP %s from %s", resp.status_code, url)
        resp.raise_for_status()
        raise requests.HTTPError(f"Unexpected HTTP {resp.status_code} from {url}", response=resp)
