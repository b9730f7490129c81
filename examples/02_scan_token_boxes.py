#!/usr/bin/env python3
"""
Example 02: Track every box holding a token with a scan.

Registers a containsAsset scan, then pages through all of its unspent boxes.
Requires the node's API key.

Usage:
    ERGO_NODE_API_KEY=... python examples/02_scan_token_boxes.py <token_id>
"""

import asyncio
import os
import sys

from ergo_node import NodeClient
from ergo_node.endpoints import ContainsAssetRule, Scan

NODE_URL = os.environ.get("ERGO_NODE_URL", "http://127.0.0.1:9053")
API_KEY = os.environ["ERGO_NODE_API_KEY"]
token_id = sys.argv[1]


async def main() -> None:
    async with NodeClient.from_url(NODE_URL, api_key=API_KEY) as node:
        scan = Scan(
            scan_name=f"holders of {token_id[:8]}",
            tracking_rule=ContainsAssetRule(asset_id=token_id),
        )
        scan_id = await node.endpoints().scan().register(scan)
        print(f"Registered scan {scan_id}")

        # a fresh scan only sees boxes the node processes after registration
        boxes = await node.extensions().get_all_unspent_boxes(scan_id, include_unconfirmed=True)
        total = sum(b.box.tokens.get(token_id, 0) for b in boxes)
        print(f"{len(boxes)} unspent boxes, {total} tokens")


asyncio.run(main())
