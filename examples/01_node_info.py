#!/usr/bin/env python3
"""
Example 01: Node info and chain tip.

Connects to a local Ergo node and prints what it reports about itself.
No API key required.

Usage:
    python examples/01_node_info.py
    python examples/01_node_info.py http://127.0.0.1:9053
"""

import asyncio
import sys

from ergo_node import NodeClient

NODE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://127.0.0.1:9053"


async def main() -> None:
    async with NodeClient.from_url(NODE_URL) as node:
        info = await node.endpoints().root().info()
        print(f"Node:     {info.name} {info.app_version}")
        print(f"Network:  {info.network}")
        print(f"Height:   {info.full_height} (headers {info.headers_height})")

        for header in await node.endpoints().blocks().last_headers(3):
            print(f"  #{header.height} {header.id[:16]}...")


asyncio.run(main())
