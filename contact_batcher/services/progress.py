from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress bar for writing export chunks.

Only drawn when stdout is a terminal; piped or captured output gets the plain
``INFO generated: ...`` lines alone.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """One bar step per chunk file; the postfix carries the running row count."""

    def __init__(self, total_files: int, *, description: str = "Exporting chunks") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.rows_written = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None = None
        if self.enabled:
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def start_file(self, file_path: Path) -> None:
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_file(self, rows: int = 0) -> None:
        self.rows_written += rows
        if self.pbar is None:
            return
        self.pbar.update(1)
        if rows:
            self.pbar.set_postfix(rows=self.rows_written)
        self.pbar.set_description(self.description)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
