"""
Persistence of optimization results.

Writes a structured JSON snapshot and a plain-text report into a
directory. Both files have fixed names and are overwritten on each call.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from pyoptimize.driver._common import SNAPSHOT_FILENAME, REPORT_FILENAME

if TYPE_CHECKING:
    from pyoptimize.driver.solution import OptimizeSolution


def save_result(
    solution: 'OptimizeSolution',
    savedir: str | Path,
) -> tuple[Path, Path]:
    """Write ``solution`` under ``savedir``.

    Args:
        solution: Result of optimize().
        savedir: Target directory, created if missing.

    Returns:
        (snapshot_path, report_path)
    """
    directory = Path(savedir)
    directory.mkdir(parents=True, exist_ok=True)

    snapshot_path = directory / SNAPSHOT_FILENAME
    report_path = directory / REPORT_FILENAME

    with open(snapshot_path, 'w', encoding='utf-8') as f:
        json.dump(solution.to_dict(), f, indent=2, default=str)

    report_path.write_text(solution.summary() + "\n", encoding='utf-8')

    return snapshot_path, report_path


def load_snapshot(savedir: str | Path) -> dict:
    """Read back the JSON snapshot written by save_result()."""
    path = Path(savedir) / SNAPSHOT_FILENAME
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
