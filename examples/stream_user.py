#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from tusk.client import AsyncClient, ClientConfig, EventType


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream the authenticated user's events")
    p.add_argument("instance", nargs="?", default="https://mastodon.social")
    p.add_argument("--token", default=os.environ.get("TUSK_ACCESS_TOKEN"))
    p.add_argument("--skip-bad-frames", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    config = ClientConfig(args.instance, access_token=args.token)
    on_error = "skip" if args.skip_bad_frames else "raise"

    async with AsyncClient(config) as client:
        async with client.stream_user(on_error=on_error) as events:
            async for event in events:
                if event.event_type is EventType.UPDATE:
                    print(f"update | @{event.status.account.acct} | {event.status.url}")
                elif event.event_type is EventType.NOTIFICATION:
                    print(f"notification | {event.notification.type} from @{event.notification.account.acct}")
                elif event.event_type is EventType.DELETE:
                    print(f"delete | {event.status_id}")
                else:
                    print("filters changed")


if __name__ == "__main__":
    asyncio.run(main())
