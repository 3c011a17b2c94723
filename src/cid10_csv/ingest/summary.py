from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReadSummary:
    """Schema for what one read of a table file produced."""
    table_name: str
    input_path: str
    rows: int
    complete: bool = True       # False when a row limit ended the read

    def render_one_line(self) -> str:
        """How a summary is formatted for the terminal."""
        line = f"{self.table_name}: rows={self.rows} input={self.input_path}"
        return line if self.complete else f"{line} (stopped early)"
