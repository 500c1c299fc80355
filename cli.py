"""Local harness for the chat relay function.

Usage examples:
- JSON string input:
  python cli.py "{\"systemPrompt\":\"You are a helpful assistant.\",\"userMessage\":\"hi\"}"

- JSON file input (prefix with @):
  python cli.py @request.json

- Force demo mode, pretty print:
  python cli.py @request.json --demo --pretty

- Exercise the method check:
  python cli.py @request.json --method GET

Notes:
- The body is passed through exactly as the function would receive it, so a
  malformed JSON string reproduces the 500 path.
"""
import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from src.chatrelay.config import DEMO_API_KEY, load_settings
from src.chatrelay.handler import RequestHandler
from src.chatrelay.types import Invocation
from src.chatrelay.logging_util import get_logger, set_level

logger = get_logger(__name__)

def _load_input(spec: str) -> Any:
    if spec.startswith("@"):
        return Path(spec[1:]).read_text(encoding="utf-8")
    return spec

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("input", help="JSON string or @path/to/json")
    ap.add_argument("--method", default="POST", help="HTTP method to simulate (default POST)")
    ap.add_argument("--demo", action="store_true", help="Ignore MISTRAL_API_KEY and run in demo mode")
    ap.add_argument("--config", help="Path to a chatrelay.yaml")
    ap.add_argument("--pretty", action="store_true", help="Pretty print the output JSON")
    ap.add_argument("--verbose", action="store_true", help="DEBUG logging")
    args = ap.parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    try:
        body = _load_input(args.input)
    except OSError as e:
        logger.error("Failed to read input: %s", e)
        return 2

    settings = load_settings(config_path=Path(args.config) if args.config else None)
    if args.demo:
        settings = dataclasses.replace(settings, api_key=DEMO_API_KEY)

    handler = RequestHandler.from_settings(settings)
    status, envelope = handler.handle(
        Invocation(
            method=args.method,
            body=body,
            log=lambda m: print(f"[LOG]: {m}", file=sys.stderr),
            error=lambda m: print(f"[ERROR]: {m}", file=sys.stderr),
        )
    )

    print(f"Status Code: {status}", file=sys.stderr)
    if args.pretty:
        print(json.dumps(envelope, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(envelope, ensure_ascii=False))

    return 0 if 200 <= status < 300 else 1

if __name__ == "__main__":
    raise SystemExit(main())
