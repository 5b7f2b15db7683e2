"""
Rendering - The scoreboard as a players x rounds x totals table.

Columns are Player, R1..Rk and Total, where k is the number of completed
rounds (at least one column is always shown). A round cell shows the
round's points, "BUST" for a bust, and "-" where a player has no entry.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .engine_core.constants import BUST_TOKEN, WIN_THRESHOLD
from .engine_core.scoring import score
from .engine_core.state import GameState, PlayerState

EMPTY_CELL = "-"


@dataclass
class ScoreRow:
    name: str
    cells: list[str] = field(default_factory=list)
    total: int = 0
    is_winner: bool = False


@dataclass
class ScoreTable:
    """Table ready for display."""
    current_round: int
    headers: list[str] = field(default_factory=list)
    rows: list[ScoreRow] = field(default_factory=list)
    banner: str | None = None


def win_banner(player: PlayerState) -> str:
    return f"{player.name} wins with {player.total} points!"


def build_table(state: GameState, win_threshold: int = WIN_THRESHOLD) -> ScoreTable:
    """Lay out the scoreboard for the given state."""
    columns = max(state.current_round - 1, 1)
    winner = state.find_winner(win_threshold)

    rows = []
    for player in state.players:
        cells = []
        for i in range(columns):
            if i >= len(player.rounds):
                cells.append(EMPTY_CELL)
            elif player.rounds[i].is_bust:
                cells.append(BUST_TOKEN)
            else:
                cells.append(str(score(player.rounds[i])))
        rows.append(
            ScoreRow(
                name=player.name,
                cells=cells,
                total=player.total,
                is_winner=winner is player,
            )
        )

    return ScoreTable(
        current_round=state.current_round,
        headers=["Player"] + [f"R{i + 1}" for i in range(columns)] + ["Total"],
        rows=rows,
        banner=win_banner(winner) if winner else None,
    )


def format_table(table: ScoreTable) -> str:
    """Plain-text rendering for the terminal."""
    lines = [list(table.headers)]
    for row in table.rows:
        lines.append([row.name] + row.cells + [str(row.total)])

    widths = [max(len(line[i]) for line in lines) for i in range(len(table.headers))]

    out = [f"Round {table.current_round}"]
    for n, line in enumerate(lines):
        name = line[0].ljust(widths[0])
        rest = [cell.rjust(widths[i + 1]) for i, cell in enumerate(line[1:])]
        out.append("  ".join([name] + rest))
        if n == 0:
            out.append("  ".join("-" * w for w in widths))

    if table.banner:
        out.append("")
        out.append(table.banner)
    return "\n".join(out)
