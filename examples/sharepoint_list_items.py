#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from spkit.lists import ItemPage, ListItemsAPI, SharePointRESTStore


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream SharePoint list items via REST")
    p.add_argument("site_url", help="e.g. https://contoso.sharepoint.com/sites/team")
    p.add_argument("list", help="List title or GUID")
    p.add_argument("--id", type=int, default=None)
    p.add_argument("--unique-id", default=None)
    p.add_argument("--query", default=None, help="CAML <View> XML")
    p.add_argument("--fields", nargs="*", default=None)
    p.add_argument("--page-size", type=int, default=None)
    p.add_argument("--max-pages", type=int, default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    token = os.environ.get("SHAREPOINT_ACCESS_TOKEN")
    if not token:
        raise SystemExit("SHAREPOINT_ACCESS_TOKEN is required")

    pages_seen = 0

    def on_page(page: ItemPage) -> bool:
        nonlocal pages_seen
        pages_seen += 1
        window = f" window={page.window_index}" if page.window_index is not None else ""
        print(f"-- page {page.page_index}{window}: {len(page.items)} items")
        if args.max_pages is not None and pages_seen >= args.max_pages:
            return False
        return True

    store = SharePointRESTStore(args.site_url, access_token=token)
    async with ListItemsAPI(store) as api:
        count = 0
        async for item in api.get_list_item(
            args.list,
            id=args.id,
            unique_id=args.unique_id,
            query=args.query,
            fields=args.fields,
            page_size=args.page_size,
            on_page=on_page,
        ):
            count += 1
            title = item.get("Title", "")
            print(f"{item.id:>8} | {title}")
        print("=" * 40)
        print(f"Items: {count}")


if __name__ == "__main__":
    asyncio.run(main())
