#!/usr/bin/env python3
"""
Run the relay API with uvicorn.

  python scripts/run_server.py
  python scripts/run_server.py --port 8080 --reload

Port defaults to PORT from the environment / .env (3000 when unset).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from src.utils.config_loader import load_settings


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the payment & contact relay API")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Override PORT from the environment")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    settings = load_settings()
    port = args.port or settings.port

    logging.getLogger(__name__).info("Server running on http://localhost:%s", port)
    uvicorn.run("src.api.main:app", host=args.host, port=port, reload=args.reload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
