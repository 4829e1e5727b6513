#!/usr/bin/env python3
from __future__ import annotations

import argparse
from itertools import islice

from tusk.client import Client, ClientConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Page through an instance's public timeline")
    p.add_argument("instance", nargs="?", default="https://mastodon.social")
    p.add_argument("--count", type=int, default=50)
    p.add_argument("--local", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()

    with Client(ClientConfig(args.instance)) as client:
        page = client.public_timeline(local=args.local, limit=20)
        items = page.items_iter()
        for status in islice(items, args.count):
            print(f"{status.created_at.isoformat()} | @{status.account.acct} | {status.url}")
        print(f"fetched {items.pages_fetched} extra pages")


if __name__ == "__main__":
    main()
