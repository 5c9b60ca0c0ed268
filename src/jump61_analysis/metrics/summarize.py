from __future__ import annotations

from typing import Sequence

import pandas as pd

from jump61.game.results import GameRecord


GAME_COLS = [
    "game", "red", "blue", "size", "seed", "winner", "plies",
    "red_nodes", "blue_nodes", "red_time_ms", "blue_time_ms",
]


def games_frame(records: Sequence[GameRecord]) -> pd.DataFrame:
    """One row per game."""
    rows = []
    for i, rec in enumerate(records):
        rows.append({
            "game": i,
            "red": rec.red,
            "blue": rec.blue,
            "size": rec.size,
            "seed": rec.seed,
            "winner": rec.winner if rec.winner is not None else "none",
            "plies": rec.plies,
            "red_nodes": rec.stats["red"].nodes,
            "blue_nodes": rec.stats["blue"].nodes,
            "red_time_ms": rec.stats["red"].time_ms,
            "blue_time_ms": rec.stats["blue"].time_ms,
        })
    return pd.DataFrame(rows, columns=GAME_COLS)


def material_frame(records: Sequence[GameRecord]) -> pd.DataFrame:
    """Long format: one row per (game, ply) with red-minus-blue square count."""
    rows = [
        {"game": i, "ply": ply + 1, "material": m}
        for i, rec in enumerate(records)
        for ply, m in enumerate(rec.material)
    ]
    return pd.DataFrame(rows, columns=["game", "ply", "material"])


def _side_view(games: pd.DataFrame, side: str) -> pd.DataFrame:
    out = pd.DataFrame({
        "name": games[side],
        "side": side,
        "win": (games["winner"] == side).astype(int),
        "loss": ((games["winner"] != side) & (games["winner"] != "none")).astype(int),
        "unfinished": (games["winner"] == "none").astype(int),
        "plies": games["plies"],
        "nodes": games[f"{side}_nodes"],
        "time_ms": games[f"{side}_time_ms"],
    })
    return out


def agent_table(games: pd.DataFrame) -> pd.DataFrame:
    """Per-agent totals over both colors, best win rate first."""
    if games.empty:
        return pd.DataFrame(columns=["rk", "name", "games", "wins", "losses", "unfinished", "win_rate", "avg_plies", "nodes", "time_ms"])

    both = pd.concat([_side_view(games, "red"), _side_view(games, "blue")], ignore_index=True)
    out = both.groupby("name").agg(
        games=("win", "size"),
        wins=("win", "sum"),
        losses=("loss", "sum"),
        unfinished=("unfinished", "sum"),
        avg_plies=("plies", "mean"),
        nodes=("nodes", "sum"),
        time_ms=("time_ms", "sum"),
    ).reset_index()
    out["win_rate"] = out["wins"] / out["games"]

    out = out.sort_values(["win_rate", "name"], ascending=[False, True]).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out[["rk", "name", "games", "wins", "losses", "unfinished", "win_rate", "avg_plies", "nodes", "time_ms"]]


def side_advantage(games: pd.DataFrame) -> pd.Series:
    """Share of finished games won by each color."""
    finished = games[games["winner"] != "none"]
    if finished.empty:
        return pd.Series({"red": 0.0, "blue": 0.0})
    return finished["winner"].value_counts(normalize=True).reindex(["red", "blue"], fill_value=0.0)
