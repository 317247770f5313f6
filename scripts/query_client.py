#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional

import websockets

LOGGER = logging.getLogger("query_client")

# QueryClient sends a single request to the solver host and prints the reply.


def _split(cards: Optional[str]) -> list[str]:
    if not cards:
        return []
    return cards.replace(",", " ").split()


def build_request(args: argparse.Namespace) -> Dict[str, Any]:
    request: Dict[str, Any] = {"v": 1, "type": args.type, "id": 1}
    player = _split(args.player)
    board = _split(args.board)
    if args.type == "evaluate":
        request["cards"] = player + board
    elif args.type == "equity":
        request.update(player=player, opponent=_split(args.opponent), board=board)
    elif args.type == "analyze":
        request.update(player=player, board=board)
    else:
        request["state"] = {
            "player": player,
            "board": board,
            "position": args.position,
            "pot": args.pot,
            "bet": args.bet,
            "stack": args.stack,
        }
    if args.iterations is not None and args.type in ("equity", "solve"):
        request["iterations"] = args.iterations
    return request


class QueryClient:
    def __init__(self, url: str) -> None:
        self.url = url

    async def send(self, request: Dict[str, Any]) -> Dict[str, Any]:
        async with websockets.connect(self.url) as ws:
            LOGGER.debug("-> %s", request)
            await ws.send(json.dumps(request))
            raw = await ws.recv()
        return json.loads(raw)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Poker equity solver query client")
    parser.add_argument("--url", default="ws://127.0.0.1:8765/")
    parser.add_argument("--type", choices=["evaluate", "equity", "solve", "analyze"], default="equity")
    parser.add_argument("--player", help='Hero cards, e.g. "As Kd"')
    parser.add_argument("--opponent", help="Known opponent cards (equity only)")
    parser.add_argument("--board", help='Community cards, e.g. "2c 7d 9h"')
    parser.add_argument("--iterations", type=int)
    parser.add_argument("--position", default="BTN")
    parser.add_argument("--pot", type=float, default=100)
    parser.add_argument("--bet", type=float, default=75)
    parser.add_argument("--stack", type=float, default=1_000)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str]) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    client = QueryClient(url=args.url)
    try:
        response = asyncio.run(client.send(build_request(args)))
    except KeyboardInterrupt:
        print("\nQuery cancelled")
        return
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main(sys.argv[1:])
