# antifragile/demo/__main__.py
# Serve the adaptive pricing API.
#
# Usage:
#   python -m antifragile.demo [--host 0.0.0.0] [--port 3000] [--no-latency]

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import uvicorn

from antifragile.demo.service import create_app


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m antifragile.demo",
        description="Adaptive pricing API with live antifragility classification.",
    )
    parser.add_argument("--host", default="0.0.0.0", help="bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=3000, help="bind port (default: 3000)")
    parser.add_argument(
        "--no-latency",
        action="store_true",
        help="skip the simulated computation delay on cache misses",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    app = create_app(simulate_latency=not args.no_latency)

    print(f"Adaptive Pricing API listening on http://{args.host}:{args.port}")
    print(f"Antifragile status at http://{args.host}:{args.port}/antifragile/status")
    sys.stdout.flush()

    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
