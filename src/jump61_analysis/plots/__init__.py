from .chart import (
    plot_game_lengths,
    plot_material_trajectories,
    plot_win_rates,
)

__all__ = [
    "plot_game_lengths",
    "plot_material_trajectories",
    "plot_win_rates",
]
