"""Export the number grid as a dated PNG snapshot."""

from __future__ import annotations

from datetime import date
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from .errors import SnapshotError  # noqa: E402
from .pool import NumberPool  # noqa: E402
from .presentation import SELECTED_COLOR, board_stats, describe_board  # noqa: E402
from .selection import SelectionBuffer  # noqa: E402

__all__ = ["export_snapshot", "snapshot_filename"]

logger = logging.getLogger(__name__)

GRID_COLUMNS = 20
FREE_COLOR = "#FFFFFF"
BORDER_COLOR = "#D1D5DB"


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def snapshot_filename(today: date | None = None) -> str:
    day = today if today is not None else date.today()
    return f"rifa-{day.isoformat()}.png"


def export_snapshot(
    pool: NumberPool,
    selection: SelectionBuffer,
    out_dir: Path | str = Path("."),
    today: date | None = None,
) -> Path:
    """Draw the number grid and save it as ``rifa-<date>.png`` in ``out_dir``.

    Taken numbers are filled with their owner's color, the current selection
    is highlighted, free numbers stay white. Returns the written path.
    """
    cells = describe_board(pool, selection)
    rows = (len(cells) + GRID_COLUMNS - 1) // GRID_COLUMNS
    stats = board_stats(pool)

    out_dir = Path(out_dir)
    out_path = out_dir / snapshot_filename(today)

    fig, ax = plt.subplots(figsize=(GRID_COLUMNS * 0.5, rows * 0.5 + 1))
    try:
        _ensure_dir(out_dir)
        for index, cell in enumerate(cells):
            col = index % GRID_COLUMNS
            row = rows - 1 - index // GRID_COLUMNS
            if cell.highlighted:
                face, text_color = SELECTED_COLOR, "white"
            elif cell.color is not None:
                face, text_color = cell.color, "white"
            else:
                face, text_color = FREE_COLOR, "#374151"
            ax.add_patch(Rectangle((col, row), 0.92, 0.92, facecolor=face, edgecolor=BORDER_COLOR, linewidth=0.6))
            ax.text(col + 0.46, row + 0.46, cell.label, ha="center", va="center", fontsize=6, color=text_color)

        ax.set_xlim(0, GRID_COLUMNS)
        ax.set_ylim(0, rows)
        ax.set_aspect("equal")
        ax.axis("off")
        ax.set_title(
            f"Tabla de Números  ·  {stats.participants} participantes  ·  "
            f"{stats.sold} vendidos  ·  {stats.available} disponibles  ·  {stats.progress_percent}%",
            fontsize=9,
        )
        fig.tight_layout()
        fig.savefig(out_path, dpi=200, facecolor="white")
    except (OSError, ValueError) as exc:
        logger.error("Snapshot export to %s failed: %s", out_path, exc)
        raise SnapshotError(f"Could not export the board image: {exc}") from exc
    finally:
        plt.close(fig)

    logger.info("Board snapshot written to %s", out_path)
    return out_path
