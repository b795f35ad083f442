#!/usr/bin/env python3
"""
Smoke test for a running contract gateway: health, contract lookup, and
(optionally) an acceptance submission.

Start the API first (in another terminal):
  cd /path/to/gateway
  INTEGRATIONS_MODE=mock uvicorn src.api.main:app --host 127.0.0.1 --port 3000

Then run this script:
  python scripts/smoke_test_gateway.py
  python scripts/smoke_test_gateway.py --base-url http://127.0.0.1:3000 --record-id recDEMO0001 --submit

--submit posts a real acceptance; only use it against the mock or a test workflow.
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone

import requests


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test the contract gateway")
    parser.add_argument("--base-url", default="http://localhost:3000", help="Gateway base URL")
    parser.add_argument("--record-id", default="recDEMO0001", help="Contract record id to look up")
    parser.add_argument("--submit", action="store_true", help="Also submit an acceptance for the record")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    print("=== Contract gateway smoke test ===\n")
    print(f"Base URL:  {base}")
    print(f"Record ID: {args.record_id}\n")

    try:
        health = requests.get(f"{base}/health", timeout=10)
    except requests.ConnectionError:
        print("   → Start the API first: uvicorn src.api.main:app --host 127.0.0.1 --port 3000")
        return 1
    print(f"1) GET /health -> {health.status_code} {health.json()}")

    missing = requests.get(f"{base}/api/contract", timeout=10)
    print(f"2) GET /api/contract (no id) -> {missing.status_code} {missing.json()}")
    if missing.status_code != 400:
        print("   ✗ expected 400")
        return 1

    contract = requests.get(f"{base}/api/contract", params={"id": args.record_id}, timeout=30)
    print(f"3) GET /api/contract?id={args.record_id} -> {contract.status_code}")
    print(f"   {contract.json()}")
    if contract.status_code != 200:
        return 1

    if args.submit:
        accepted_at = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        payload = {"airtable_record_id": args.record_id, "accepted_at": accepted_at, "status": "accepted"}
        submit = requests.post(f"{base}/api/submit", json=payload, timeout=30)
        print(f"4) POST /api/submit -> {submit.status_code} {submit.text[:200]}")
        if not submit.ok:
            return 1

    print("\n✓ Smoke test passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
