from __future__ import annotations

import logging
import random

from jump61.ai.base import Agent
from jump61.config import DEFAULT_SIZE, SELFPLAY_MAX_MOVES, SELFPLAY_OPENING_MOVES
from jump61.core.board import Board
from jump61.game.results import GameRecord
from jump61.game.state import GameState
from jump61.types import Owner, Side, other
from jump61.ui.prompts import parse_move
from jump61.ui.render import render

logger = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_red: Agent, agent_blue: Agent, current: Side) -> str:
    red_name = _agent_name(agent_red, "Red")
    blue_name = _agent_name(agent_blue, "Blue")

    header = f"Red: {red_name} | Blue: {blue_name} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def _stats_suffix(info: dict) -> str:
    return (
        f" | d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(agent_red: Agent, agent_blue: Agent, size: int = DEFAULT_SIZE) -> Owner:
    """Play one interactive game in the terminal and return the winner (None if quit)."""
    state = GameState(board=Board(size))

    while True:
        board = state.board
        render(board, _status_with_agents(state.last_status, agent_red, agent_blue, state.current))

        w = board.winner()
        if w is not None:
            render(board, _status_with_agents(f"{w.capitalize()} wins!", agent_red, agent_blue, state.current))
            return w

        side = state.current
        agent = agent_red if side == "red" else agent_blue

        try:
            if agent.name == "Human":
                raw = input(f"{side.capitalize()} move: ")
                move = parse_move(raw, board.size())
                if move is None:
                    render(board, _status_with_agents("Game quit.", agent_red, agent_blue, side))
                    return None
                if not board.is_legal(side, *move):
                    raise ValueError(f"Square {board.move_string(*move)} belongs to {other(side)}.")
                state.report_move(side, *move)
            else:
                move = agent.choose_move(state)
                info = getattr(agent, "last_info", None)
                if info:
                    state.last_status += _stats_suffix(info)

            board.add_spot(side, *move)

        except ValueError as e:
            state.last_status = str(e)


def seed_agent(agent: Agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if rng is not None:
        rng.seed(seed)


def play_headless(
    agent_red: Agent,
    agent_blue: Agent,
    size: int = DEFAULT_SIZE,
    seed_base: int = 0,
    opening_moves: int = SELFPLAY_OPENING_MOVES,
    max_moves: int = SELFPLAY_MAX_MOVES,
) -> GameRecord:
    """
    Play a game with no rendering. The first OPENING_MOVES plies are random
    legal moves drawn from a generator seeded with SEED_BASE.
    """
    state = GameState(board=Board(size), last_status="")
    board = state.board
    record = GameRecord(
        red=_agent_name(agent_red, "Red"),
        blue=_agent_name(agent_blue, "Blue"),
        size=size,
        seed=seed_base,
    )

    seed_agent(agent_red, seed_base + 101)
    seed_agent(agent_blue, seed_base + 202)

    rng = random.Random(seed_base)
    for _ in range(opening_moves):
        if board.winner() is not None:
            break
        side = state.current
        board.add_spot_at(side, rng.choice(board.valid_moves(side)))
        record.plies += 1
        record.material.append(board.num_of_side("red") - board.num_of_side("blue"))

    while board.winner() is None and record.plies < max_moves:
        side = state.current
        agent = agent_red if side == "red" else agent_blue
        move = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = record.stats[side]
        side_stats.moves += 1
        side_stats.time_ms += max(1, int(info.get("time_ms", 0)))
        side_stats.nodes += int(info.get("nodes", 0))
        side_stats.cutoffs += int(info.get("cutoffs", 0))

        board.add_spot(side, *move)
        record.plies += 1
        record.material.append(board.num_of_side("red") - board.num_of_side("blue"))

    record.winner = board.winner()
    if record.winner is None:
        logger.warning("Game %s vs %s (seed %d) hit the %d-ply cap", record.red, record.blue, seed_base, max_moves)
    return record
