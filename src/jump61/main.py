from __future__ import annotations

import argparse
import logging
import time

from jump61.ai.minimax_agent import MinimaxAgent
from jump61.config import DEFAULT_SIZE, LOG_FORMAT, SEARCH_DEPTH
from jump61.game.controller import run_game
from jump61.ui.human import HumanAgent


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Jump61 in the terminal.")
    ap.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Board size N (N x N)")
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="AI search depth")
    ap.add_argument("--verbose", action="store_true", help="Log search decisions at DEBUG level")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human (red) vs AI")
    print("3) AI vs Human (blue)")
    print("4) AI vs AI")
    print("5) Run self-play series")

    choice = input("Choice: ").strip()

    def ai(side: str) -> MinimaxAgent:
        return MinimaxAgent(name=f"Minimax {side} (d{args.depth})", depth=args.depth)

    if choice == "5":
        from jump61.scripts.selfplay import main as selfplay_main

        selfplay_main(["--size", str(args.size), "--depth", str(args.depth)])
        return

    players = {
        "1": (HumanAgent(), HumanAgent()),
        "2": (HumanAgent(), ai("blue")),
        "3": (ai("red"), HumanAgent()),
        "4": (ai("red"), ai("blue")),
    }
    if choice not in players:
        print("\nInvalid choice. Defaulting to Human vs Human.\n")
        time.sleep(1)
    red, blue = players.get(choice, players["1"])

    print(f"\nStarting game: {red.name} vs {blue.name}\n")
    run_game(red, blue, size=args.size)


if __name__ == "__main__":
    main()
