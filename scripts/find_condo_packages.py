#!/usr/bin/env python3
"""Look up condo package assets, and optionally send them over WhatsApp.

Reads store and messaging credentials from the environment (or a repo-root
`.env`). The messaging backend is chosen by `NOTIFIER_BACKEND`.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from condo_notifier import (  # noqa: E402
    build_dispatcher_from_env,
    build_locator_from_env,
    find_package_assets,
    parse_package_request,
    send_package,
)


def main() -> int:
    args = parse_args()
    _load_env_file(REPO_ROOT / ".env")
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    request = parse_package_request(
        {
            "condoName": args.condo,
            "sqft": args.sqft,
            "phoneNumber": args.phone,
            "name": args.name,
            "message": args.message,
        },
        require_recipient=args.send,
    )
    locator = build_locator_from_env()
    if args.send:
        result = send_package(request, locator, build_dispatcher_from_env())
    else:
        result = find_package_assets(request, locator)

    print(json.dumps(result, indent=2))
    return 1 if "error" in result else 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find condo package images by unit size and optionally send them."
    )
    parser.add_argument("--condo", required=True, help="Condo folder name in the bucket.")
    parser.add_argument("--sqft", required=True, help="Unit size, matched as '<sqft>sqft'.")
    parser.add_argument("--phone", default=None, help="Recipient phone number.")
    parser.add_argument("--name", default=None, help="Recipient display name.")
    parser.add_argument("--message", default=None, help="Override the message text.")
    parser.add_argument(
        "--send",
        action="store_true",
        help="Send the message and images instead of only listing URLs.",
    )
    return parser.parse_args()


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)


if __name__ == "__main__":
    sys.exit(main())
