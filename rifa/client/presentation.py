"""Display state derived from the pool and the current selection."""

from __future__ import annotations

from dataclasses import dataclass

from .pool import POOL_SIZE, NumberPool
from .selection import SelectionBuffer

SELECTED_COLOR = "#3B82F6"


@dataclass(frozen=True)
class CellView:
    number: int
    label: str
    enabled: bool
    highlighted: bool
    color: str | None
    owner: str | None
    title: str


@dataclass(frozen=True)
class BoardStats:
    participants: int
    sold: int
    available: int
    progress_percent: int


def format_number(number: int) -> str:
    return f"{number:03d}"


def describe_cell(number: int, pool: NumberPool, selection: SelectionBuffer) -> CellView:
    owner = pool.owner_of(number)
    label = format_number(number)
    return CellView(
        number=number,
        label=label,
        enabled=owner is None,
        highlighted=number in selection,
        color=owner.color if owner is not None else None,
        owner=owner.name if owner is not None else None,
        title=f"{label} - {owner.name}" if owner is not None else f"Número {label}",
    )


def describe_board(pool: NumberPool, selection: SelectionBuffer) -> list[CellView]:
    return [describe_cell(number, pool, selection) for number in range(POOL_SIZE)]


def board_stats(pool: NumberPool) -> BoardStats:
    sold = pool.occupied_count
    return BoardStats(
        participants=len(pool.participants),
        sold=sold,
        available=POOL_SIZE - sold,
        # half-up, 5 of 1000 sold shows as 1%
        progress_percent=(sold * 100 + POOL_SIZE // 2) // POOL_SIZE,
    )


def render_text_grid(cells: list[CellView], columns: int = 20) -> str:
    """Plain-text grid: ``[123]`` selected, ``#123`` taken, `` 123`` free."""
    rows = []
    for start in range(0, len(cells), columns):
        parts = []
        for cell in cells[start : start + columns]:
            if cell.highlighted:
                parts.append(f"[{cell.label}]")
            elif not cell.enabled:
                parts.append(f"#{cell.label} ")
            else:
                parts.append(f" {cell.label} ")
        rows.append("".join(parts).rstrip())
    return "\n".join(rows)


def render_participants(pool: NumberPool) -> str:
    lines = []
    for participant in pool.participants:
        numbers = " ".join(format_number(number) for number in participant.numbers)
        lines.append(f"{participant.color}  {participant.name}: {numbers}")
    return "\n".join(lines)
