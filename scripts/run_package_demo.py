#!/usr/bin/env python3
"""Run the package lookup and delivery flow locally.

Uses an in-memory key listing and the console dispatcher, so no store or
WhatsApp credentials are needed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from condo_notifier import (  # noqa: E402
    AssetLocator,
    ConsoleDispatcher,
    StoreConfig,
    parse_package_request,
    send_package,
)
from condo_notifier.adapters.fake_senders import make_in_memory_list_keys  # noqa: E402


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    payload = load_payload(args.payload_file)
    request = parse_package_request(payload, require_recipient=True)
    locator = AssetLocator(
        StoreConfig(bucket="demo-bucket", public_host="zynarvis.com"),
        make_in_memory_list_keys(sample_keys()),
    )
    result = send_package(request, locator, ConsoleDispatcher())

    print("")
    print("[SUMMARY]")
    print(json.dumps(result, indent=2))
    return 0 if result.get("success") else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Execute the package flow with a sample payload and fake adapters."
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file with condoName/sqft/phoneNumber/name fields.",
    )
    return parser.parse_args()


def load_payload(payload_file: Path | None) -> dict[str, Any]:
    if payload_file is None:
        return sample_payload()
    with payload_file.open("r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


def sample_payload() -> dict[str, Any]:
    return {
        "condoName": "Alpha Residences",
        "sqft": "650",
        "phoneNumber": "+6591234567",
        "name": "Jamie",
    }


def sample_keys() -> list[str]:
    return [
        "Alpha Residences/650sqft living room.jpg",
        "Alpha Residences/650sqft floor plan.pdf",
        "Alpha Residences/900sqft living room.jpg",
        "Beta Towers/650sqft living room.jpg",
    ]


if __name__ == "__main__":
    sys.exit(main())
