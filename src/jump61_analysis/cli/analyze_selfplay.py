from __future__ import annotations

import argparse
import logging
from pathlib import Path

from jump61.config import DEFAULT_SIZE, LOG_FORMAT, SEARCH_DEPTH, SELFPLAY_GAMES, SELFPLAY_OPENING_MOVES
from jump61.scripts.selfplay import default_roster, run_series

from ..metrics.summarize import agent_table, games_frame, material_frame, side_advantage
from ..plots.chart import plot_game_lengths, plot_material_trajectories, plot_win_rates


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run a Jump61 self-play series and analyze the results.")
    ap.add_argument("--games", type=int, default=SELFPLAY_GAMES, help="Games per ordered pair of agents")
    ap.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Board size N (N x N)")
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Search depth of the main minimax agent")
    ap.add_argument("--seed", type=int, default=0, help="Base seed for random openings")
    ap.add_argument("--opening", type=int, default=SELFPLAY_OPENING_MOVES, help="Random opening plies per game")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    ap.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    records = run_series(
        default_roster(args.depth),
        games_per_pair=args.games,
        size=args.size,
        seed=args.seed,
        opening_moves=args.opening,
    )

    games = games_frame(records)
    agents = agent_table(games)

    print(f"\nGames: {len(games):,}  Board: {args.size}x{args.size}")

    print("\n=== Agents ===")
    print(agents.to_string(index=False))

    print("\n=== Wins by color (finished games) ===")
    print(side_advantage(games).to_string())

    if not games.empty:
        print("\n=== Game length ===")
        print(games["plies"].describe().to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_material_trajectories(material_frame(records), outdir, show=args.show)
    plot_game_lengths(games, outdir, show=args.show)
    plot_win_rates(agents, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
