from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        fig.savefig(outdir / filename, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_material_trajectories(material: pd.DataFrame, outdir: Path, *, show: bool, max_games: int = 20) -> None:
    """Red-minus-blue square count over the course of each game."""
    if material.empty:
        return

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure(figsize=(10, 5))
    for game, g in list(material.groupby("game"))[:max_games]:
        plt.plot(g["ply"], g["material"], alpha=0.6, label=f"game {game}")
    plt.axhline(0, color="gray", linewidth=0.8)
    plt.title("Material (red - blue squares) per ply")
    plt.xlabel("ply")
    plt.ylabel("material")

    _finish(fig, outdir, "material_trajectories.png", show=show)


def plot_game_lengths(games: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    if "plies" not in games.columns or games.empty:
        return

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure()
    plt.hist(games["plies"].dropna(), bins=30)
    plt.title("Histogram: game length")
    plt.xlabel("plies")
    plt.ylabel("count")

    _finish(fig, outdir, "hist_plies.png", show=show)


def plot_win_rates(agents: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    if "name" not in agents.columns or "win_rate" not in agents.columns or agents.empty:
        return

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure(figsize=(10, 5))
    plt.bar(agents["name"].astype(str), agents["win_rate"].astype(float))
    plt.title("Win rate by agent")
    plt.xlabel("agent")
    plt.ylabel("win rate")
    plt.ylim(0, 1)
    plt.xticks(rotation=45, ha="right")

    _finish(fig, outdir, "win_rates.png", show=show)
