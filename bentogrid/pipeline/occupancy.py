# bentogrid/pipeline/occupancy.py
from __future__ import annotations
from typing import List, Tuple


class OccupancyGrid:
    """
    Карта занятых ячеек: фиксированное число колонок, строки добавляются лениво.
    grid[row][col] == True: ячейку уже занял какой-то блок.
    Сетка никогда не уменьшается.
    """

    def __init__(self, columns: int):
        self.columns = columns
        self.rows: List[List[bool]] = []

    def __len__(self) -> int:
        return len(self.rows)

    def ensure_rows(self, n_rows: int) -> None:
        while len(self.rows) < n_rows:
            self.rows.append([False] * self.columns)

    def can_fit(self, col: int, row: int, col_span: int, row_span: int) -> bool:
        if col + col_span > self.columns:
            return False
        # растим сетку даже если блок в итоге не влезет: следующие запросы видят новые строки
        self.ensure_rows(row + row_span)
        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                if self.rows[r][c]:
                    return False
        return True

    def occupy(self, col: int, row: int, col_span: int, row_span: int) -> None:
        # вызывающий уже проверил can_fit для этого прямоугольника
        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                self.rows[r][c] = True

    def next_free_position(self) -> Tuple[int, int]:
        """(col, row) первой свободной ячейки; если всё занято: начало следующей строки."""
        for row, cells in enumerate(self.rows):
            for col, taken in enumerate(cells):
                if not taken:
                    return col, row
        return 0, len(self.rows)
