"""HTTP endpoint for place searches.

Serves ``POST /api/places`` with a JSON body
``{lat, lng, radiusMeters, includedTypes}`` and answers with the shaped
response envelope.
"""
from __future__ import annotations

import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, Dict, Optional, Tuple

from . import config
from .http import MissingApiKeyError, RequestMetrics, UpstreamError
from .pipeline import InvalidRequestError, build_places_client, search_places, validate_request

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Optional[RequestMetrics]], Any]


def _default_client_factory(metrics: Optional[RequestMetrics]) -> Any:
    return build_places_client(metrics=metrics)


def handle_places_request(
    payload: Any,
    client_factory: ClientFactory = _default_client_factory,
) -> Tuple[int, Dict[str, Any]]:
    """Run one search and map the outcome to ``(status, body)``."""
    try:
        request = validate_request(payload)
    except InvalidRequestError as exc:
        return 400, {"error": str(exc)}

    metrics = RequestMetrics()
    try:
        client = client_factory(metrics)
        result = search_places(request, client)
    except MissingApiKeyError:
        logger.error("Places API key is not configured")
        return 500, {"error": "Server API key missing"}
    except UpstreamError as exc:
        logger.error("Places search failed: %s", exc)
        return 500, {"error": "Server error", "details": str(exc)}

    logger.info("Search summary: %s", result.summary)
    return 200, result.response


class PlacesHandler(BaseHTTPRequestHandler):
    client_factory: ClientFactory = staticmethod(_default_client_factory)

    def do_POST(self) -> None:
        if self.path.split("?", 1)[0] != config.PLACES_ENDPOINT_PATH:
            self._send_json({"error": "Not found"}, 404)
            return
        try:
            payload = self._read_json_body()
        except (ValueError, UnicodeDecodeError):
            self._send_json({"error": "Invalid JSON body"}, 400)
            return
        status, body = handle_places_request(payload, type(self).client_factory)
        self._send_json(body, status)

    def _read_json_body(self) -> Any:
        length = int(self.headers.get("Content-Length", 0) or 0)
        raw = self.rfile.read(length) if length > 0 else b""
        return json.loads(raw) if raw else {}

    def _send_json(self, data: Dict[str, Any], status: int = 200) -> None:
        body = json.dumps(data).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, fmt: str, *args: Any) -> None:
        logger.info("%s - %s", self.address_string(), fmt % args)


def make_server(host: Optional[str] = None, port: Optional[int] = None) -> ThreadingHTTPServer:
    host = config.SERVER_HOST if host is None else host
    port = config.SERVER_PORT if port is None else port
    return ThreadingHTTPServer((host, port), PlacesHandler)


def serve(host: Optional[str] = None, port: Optional[int] = None) -> int:
    server = make_server(host, port)
    bound_host, bound_port = server.server_address[:2]
    logger.info("Serving %s on http://%s:%s", config.PLACES_ENDPOINT_PATH, bound_host, bound_port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
    return 0
