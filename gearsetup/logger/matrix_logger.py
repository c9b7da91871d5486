"""Matrix display functionality for logs."""

import html
from typing import Any, Callable, Optional, Sequence

from gearsetup.logger.base_logger import AlgorithmLogger
from gearsetup.logger.formatting import format_vertex, format_weight


class MatrixLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with adjacency matrix display support."""

    def adjacency(
        self,
        matrix: Any,
        labels: Sequence[Any],
        format_func: Optional[Callable[[Any], str]] = None,
        title: str = "",
    ) -> None:
        """
        Display a boolean adjacency matrix with row and column labels.

        ``matrix`` can be a numpy array or a nested list; cells are shown as
        ``1`` for adjacent and ``.`` otherwise.
        """
        if self.disabled or len(labels) == 0:
            return

        if format_func is None:
            format_func = format_vertex

        names = [format_func(label) for label in labels]
        width = max(len(name) for name in names)

        if title:
            self.logger.info(f"\n{title}:")

        lines = [" " * width + " | " + " ".join(str(i % 10) for i in range(len(names)))]
        lines.append("-" * len(lines[0]))
        for row_index, name in enumerate(names):
            cells = " ".join(
                "1" if matrix[row_index][col] else "." for col in range(len(names))
            )
            lines.append(f"{name.ljust(width)} | {cells}")

        ascii_matrix = "\n".join(lines)
        self.logger.info(ascii_matrix)

        wrapper = '<div class="matrix-container">'
        if title:
            wrapper += f"<h4>{html.escape(title)}</h4>"
        wrapper += f"<pre>{html.escape(ascii_matrix)}</pre></div>"
        self._html_content.append(wrapper)

    def log_component(self, index: int, size: int, strategy: str) -> None:
        """Log which strategy handles a connected component."""
        if self.disabled:
            return

        if strategy == "ISOLATED":
            self.info(f"Component {index}: isolated vertex, always selected")
        elif strategy == "PAIR":
            self.info(f"Component {index}: two vertices, keeping the heavier one")
        elif strategy == "RECURSIVE":
            self.info(
                f"Component {index}: {size} vertices, running exhaustive search"
            )

    def log_best_selection(self, weight: float, size: int) -> None:
        """Log an improvement of the best selection during the search."""
        if self.disabled:
            return

        self.debug(f"New best selection: {size} vertices, weight {format_weight(weight)}")

    def log_reduction(self, stage: str, before: int, after: int) -> None:
        """Log how many candidates survived a reduction stage."""
        if self.disabled:
            return

        removed = before - after
        if removed:
            self.info(f"{stage}: {before} -> {after} candidates ({removed} removed)")
        else:
            self.info(f"{stage}: {after} candidates, nothing removed")
