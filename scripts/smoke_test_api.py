#!/usr/bin/env python3
"""
Smoke test a running relay: health, config, verify and (optionally) contact.

Start the API first (in another terminal), ideally in mock mode:
  INTEGRATIONS_MODE=mock python scripts/run_server.py --port 3000

Then run this script:
  python scripts/smoke_test_api.py
  python scripts/smoke_test_api.py --base-url http://127.0.0.1:3000 --reference T123 --send-contact

--send-contact posts a real message to the configured Telegram chat.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Tuple

import requests


def post_json(url: str, data: Dict[str, Any], timeout: int = 30) -> Tuple[int, Dict[str, Any]]:
    r = requests.post(url, json=data, timeout=timeout)
    return r.status_code, r.json()


def get_json(url: str, timeout: int = 30) -> Dict[str, Any]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.json()


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test the relay API")
    parser.add_argument("--base-url", default="http://localhost:3000", help="API base URL")
    parser.add_argument("--reference", default="T123", help="Transaction reference to verify")
    parser.add_argument("--email", default="smoke@example.com", help="Payer email")
    parser.add_argument("--send-contact", action="store_true", help="Also post a contact-form message")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    try:
        print("health:", get_json(f"{base}/health"))
    except requests.ConnectionError:
        print("Connection refused. Start the API first: python scripts/run_server.py")
        return 1

    print("config:", get_json(f"{base}/api/config"))

    code, body = post_json(f"{base}/api/verify", {"reference": args.reference, "email": args.email, "name": "Smoke Test"})
    print(f"verify [{code}]:", body)

    code, body = post_json(f"{base}/api/verify", {"reference": args.reference})
    print(f"verify without email [{code}]:", body)
    if code != 400:
        print("Expected 400 for a request without email")
        return 1

    if args.send_contact:
        code, body = post_json(
            f"{base}/api/contact",
            {"name": "Smoke Test", "email": args.email, "message": "Smoke test message, please ignore."},
        )
        print(f"contact [{code}]:", body)

    return 0


if __name__ == "__main__":
    sys.exit(main())
