"""CLI entrypoint."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from placefinder import config
from placefinder.categories import resolve_category
from placefinder.http import RequestMetrics, UpstreamError
from placefinder.pipeline import (
    InvalidRequestError,
    build_places_client,
    search_places,
    validate_request,
)
from placefinder.response import write_response_json
from placefinder.server import serve

_load_dotenv = load_dotenv


def _repo_root() -> Path:
    return Path(__file__).resolve().parent


def load_env(path: str = ".env", root_dir: Optional[Path] = None) -> None:
    """Load a repo-root .env file, if present, without overriding real env vars."""
    root = Path(root_dir) if root_dir else _repo_root()
    env_path = (root / path).resolve()
    if not env_path.exists():
        return
    _load_dotenv(dotenv_path=env_path, override=False)


def _split_types(raw: str) -> List[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find nearby places by category using Google Places")
    parser.add_argument("--config", type=str, default=None, help="Path to search_config.json")
    parser.add_argument("--verbose", action="store_true", help="Log filter rejections")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Run one search and print the JSON response")
    search.add_argument("--lat", type=float, required=True)
    search.add_argument("--lng", type=float, required=True)
    search.add_argument("--radius-m", type=float, default=None, help="Defaults to config.DEFAULT_RADIUS_M")
    search.add_argument("--types", type=str, required=True, help="Comma-separated place types")
    search.add_argument("--max-results", type=int, default=None)
    search.add_argument("--out", type=str, default=None, help="Write the response JSON to this path")

    srv = sub.add_parser("serve", help="Serve POST /api/places")
    srv.add_argument("--host", type=str, default=None)
    srv.add_argument("--port", type=int, default=None)

    preflight = sub.add_parser("preflight", help="Run offline checks only")
    preflight.add_argument("--types", type=str, default=None, help="Show the category these types resolve to")

    return parser.parse_args(argv)


def run_preflight(api_key: Optional[str], types: Optional[str]) -> int:
    ok = True
    if api_key:
        print("API key: OK")
    else:
        print("API key: MISSING")
        ok = False

    print(
        "Caps: max_results={max_results}, fanout_max_workers={workers}, timeout={timeout}s".format(
            max_results=config.MAX_RESULTS,
            workers=config.FANOUT_MAX_WORKERS,
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
    )
    if config.BRAND_OVERRIDES:
        print(f"Brand overrides: {', '.join(sorted(config.BRAND_OVERRIDES))}")
    if types:
        print(f"Category: {resolve_category(_split_types(types))}")
    return 0 if ok else 1


def run_search(args: argparse.Namespace) -> int:
    if args.max_results is not None and args.max_results <= 0:
        print(f"Invalid request: --max-results must be positive, got {args.max_results}", file=sys.stderr)
        return 2

    payload = {
        "lat": args.lat,
        "lng": args.lng,
        "radiusMeters": args.radius_m if args.radius_m is not None else config.DEFAULT_RADIUS_M,
        "includedTypes": _split_types(args.types),
    }
    try:
        request = validate_request(payload)
    except InvalidRequestError as exc:
        print(f"Invalid request: {exc}", file=sys.stderr)
        return 2

    metrics = RequestMetrics()
    try:
        client = build_places_client(metrics=metrics)
        result = search_places(request, client, max_results=args.max_results)
    except UpstreamError as exc:
        print(f"Search failed: {exc}", file=sys.stderr)
        return 1

    if args.out:
        write_response_json(args.out, result.response)
        print(f"Wrote {len(result.response['places'])} places to {args.out}")
    else:
        print(json.dumps(result.response, ensure_ascii=False, indent=2))

    print("Summary:", file=sys.stderr)
    for key, value in result.summary.items():
        print(f"- {key}: {value}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_env()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config.load_search_config(args.config)

    if args.command == "preflight":
        return run_preflight(config.get_api_key(), args.types)
    if args.command == "serve":
        return serve(args.host, args.port)
    return run_search(args)


if __name__ == "__main__":
    raise SystemExit(main())
