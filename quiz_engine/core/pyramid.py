"""Number pyramid generation and verification.

A pyramid of size ``N`` is a lower-triangular grid: row ``i`` holds ``N - i``
cells. Row 0 holds randomly drawn seeds; every other cell is derived from the
two cells above it::

    value(row, col) = evaluate(op, value(row - 1, col), value(row - 1, col + 1))
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
import math
import random
from typing import Protocol

from quiz_engine.core.models import Operator, PyramidCell, VerificationResult
from quiz_engine.core.operators import evaluate


class RandomSource(Protocol):
    def random(self) -> float:
        """Return a float in [0, 1)."""
        ...


@dataclass(frozen=True, slots=True)
class PyramidGrid:
    """Immutable pyramid of seed and derived cells."""

    operator: Operator
    rows: tuple[tuple[PyramidCell, ...], ...]

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def seeds(self) -> tuple[int, ...]:
        if not self.rows:
            return ()
        return tuple(cell.value for cell in self.rows[0])

    @property
    def derived_count(self) -> int:
        return self.size * (self.size - 1) // 2

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.size and 0 <= column < self.size - row

    def cell(self, row: int, column: int) -> PyramidCell:
        if not self.contains(row, column):
            raise IndexError(f"Cell ({row}, {column}) is outside a pyramid of size {self.size}")
        return self.rows[row][column]

    def value(self, row: int, column: int) -> int:
        return self.cell(row, column).value

    def derived_cells(self) -> Iterator[PyramidCell]:
        for row in self.rows[1:]:
            yield from row


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding towards +inf."""
    return math.floor(value + 0.5)


def draw_seed(rng: RandomSource, min_num: int, max_num: int) -> int:
    return round_half_up(rng.random() * (max_num - min_num) + min_num)


def build_pyramid(seeds: Sequence[int], operator: Operator) -> PyramidGrid:
    """Derive a full pyramid from an explicit row of seeds."""
    rows: list[tuple[PyramidCell, ...]] = []
    if seeds:
        rows.append(
            tuple(PyramidCell(row=0, column=col, value=int(v), is_seed=True) for col, v in enumerate(seeds))
        )
    for row in range(1, len(seeds)):
        above = rows[row - 1]
        rows.append(
            tuple(
                PyramidCell(
                    row=row,
                    column=col,
                    value=evaluate(operator, above[col].value, above[col + 1].value),
                )
                for col in range(len(above) - 1)
            )
        )
    return PyramidGrid(operator=operator, rows=tuple(rows))


def generate_pyramid(
    size: int,
    min_num: int,
    max_num: int,
    operator: Operator,
    rng: RandomSource | None = None,
) -> PyramidGrid:
    """Draw ``size`` seeds from ``[min_num, max_num]`` and derive the pyramid."""
    source = rng if rng is not None else random.Random()
    seeds = [draw_seed(source, min_num, max_num) for _ in range(max(0, size))]
    return build_pyramid(seeds, operator)


def verify(grid: PyramidGrid, submitted: Mapping[tuple[int, int], float | None]) -> VerificationResult:
    """Compare submitted values for every derived cell.

    Missing or ``None`` entries count as incorrect. Equality is exact.
    """
    correct = 0
    incorrect: list[tuple[int, int]] = []
    for cell in grid.derived_cells():
        position = (cell.row, cell.column)
        entered = submitted.get(position)
        if entered is not None and entered == cell.value:
            correct += 1
        else:
            incorrect.append(position)
    total = grid.derived_count
    return VerificationResult(
        all_correct=not incorrect,
        correct_count=correct,
        total_count=total,
        incorrect_cells=tuple(incorrect),
    )


def award_points(result: VerificationResult, max_points: int) -> int:
    """Partial credit: ``floor(correct / total * max_points)``.

    A pyramid without derived cells is fully correct.
    """
    if result.total_count == 0:
        return max_points
    return (result.correct_count * max_points) // result.total_count
