from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, Sequence

from jump61.ai.minimax_agent import MinimaxAgent
from jump61.ai.random_agent import RandomAgent
from jump61.config import (
    DEFAULT_SIZE,
    LOG_FORMAT,
    SEARCH_DEPTH,
    SELFPLAY_GAMES,
    SELFPLAY_MAX_MOVES,
    SELFPLAY_OPENING_MOVES,
)
from jump61.game.controller import play_headless
from jump61.game.results import GameRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[], object]


@dataclass
class Agg:
    games: int = 0
    wins: int = 0
    losses: int = 0
    unfinished: int = 0

    plies: int = 0
    nodes: int = 0
    time_ms: int = 0


def default_roster(depth: int = SEARCH_DEPTH) -> List[Team]:
    return [
        Team(f"Minimax d{depth}", partial(MinimaxAgent, name=f"Minimax d{depth}", depth=depth)),
        Team("Minimax d2", partial(MinimaxAgent, name="Minimax d2", depth=2)),
        Team("Random", partial(RandomAgent, name="Random")),
    ]


def run_series(
    teams: Sequence[Team],
    games_per_pair: int = SELFPLAY_GAMES,
    size: int = DEFAULT_SIZE,
    seed: int = 0,
    opening_moves: int = SELFPLAY_OPENING_MOVES,
    max_moves: int = SELFPLAY_MAX_MOVES,
) -> List[GameRecord]:
    """Every ordered pair of distinct teams plays GAMES_PER_PAIR games, first team as red."""
    records: List[GameRecord] = []
    pair_index = 0
    for red in teams:
        for blue in teams:
            if red is blue:
                continue
            base_seed = seed + 1000 * pair_index
            pair_index += 1
            for g in range(games_per_pair):
                rec = play_headless(
                    red.make(),
                    blue.make(),
                    size=size,
                    seed_base=base_seed + g,
                    opening_moves=opening_moves,
                    max_moves=max_moves,
                )
                records.append(rec)
                logger.info("%s vs %s game %d/%d: winner=%s plies=%d",
                            rec.red, rec.blue, g + 1, games_per_pair, rec.winner, rec.plies)
    return records


def standings(records: Sequence[GameRecord]) -> Dict[str, Agg]:
    table: Dict[str, Agg] = {}
    for rec in records:
        for side, name in (("red", rec.red), ("blue", rec.blue)):
            a = table.setdefault(name, Agg())
            a.games += 1
            a.plies += rec.stats[side].moves
            a.nodes += rec.stats[side].nodes
            a.time_ms += rec.stats[side].time_ms
            if rec.winner is None:
                a.unfinished += 1
            elif rec.winner == side:
                a.wins += 1
            else:
                a.losses += 1
    return table


def format_standings(table: Dict[str, Agg]) -> str:
    rows = sorted(table.items(), key=lambda kv: (-kv[1].wins, kv[1].losses, kv[0]))
    width = max([len(name) for name, _ in rows] + [4])
    lines = [f"{'Team':<{width}}  {'G':>4} {'W':>4} {'L':>4} {'U':>4} {'ms/move':>8}"]
    for name, a in rows:
        ms = (a.time_ms / a.plies) if a.plies else 0.0
        lines.append(f"{name:<{width}}  {a.games:>4} {a.wins:>4} {a.losses:>4} {a.unfinished:>4} {ms:>8.1f}")
    return "\n".join(lines)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run a Jump61 self-play series between AI agents.")
    ap.add_argument("--games", type=int, default=SELFPLAY_GAMES, help="Games per ordered pair of agents")
    ap.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Board size N (N x N)")
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Search depth of the main minimax agent")
    ap.add_argument("--seed", type=int, default=0, help="Base seed for random openings")
    ap.add_argument("--opening", type=int, default=SELFPLAY_OPENING_MOVES, help="Random opening plies per game")
    ap.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    records = run_series(
        default_roster(args.depth),
        games_per_pair=args.games,
        size=args.size,
        seed=args.seed,
        opening_moves=args.opening,
    )
    print("\n=== SELF-PLAY RESULTS ===")
    print(format_standings(standings(records)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
