# bentogrid/pipeline/layout.py
from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import FALLBACK_ROW_WINDOW, FALLBACK_ATTEMPTS_PER_COLUMN
from .blocks import BlockShape, UNIT_SHAPE, rank_shapes
from .occupancy import OccupancyGrid
from .types import ImageItem, PlacementRecord, LayoutStats

log = logging.getLogger("bentogrid.layout")

# (col, row, shape) во внутренних 0-индексных координатах
Placement = Tuple[int, int, BlockShape]


class InvalidArgument(ValueError):
    """Некорректный вход раскладки: columns < 1, размеры не конечные или <= 0, повторяющиеся id, seed < 0."""


def _positive(x: float) -> bool:
    # nan/inf отсекаем: пропорция должна быть конечным положительным числом
    return math.isfinite(x) and x > 0


def _validate(images: Sequence[ImageItem], columns: int, seed: Optional[int] = None) -> None:
    if columns < 1:
        raise InvalidArgument(f"columns must be >= 1, got {columns}")
    if seed is not None and seed < 0:
        raise InvalidArgument(f"seed must be >= 0, got {seed}")
    seen = set()
    for img in images:
        if not (_positive(img.width) and _positive(img.height)):
            raise InvalidArgument(f"image {img.id!r}: width/height must be finite and > 0, got {img.width}x{img.height}")
        if img.id in seen:
            raise InvalidArgument(f"duplicate image id {img.id!r}")
        seen.add(img.id)


def shuffled(images: Sequence[ImageItem], seed: Optional[int] = None) -> List[ImageItem]:
    """Равномерная случайная перестановка (Fisher-Yates внутри numpy)."""
    rng = np.random.default_rng(seed)
    return [images[i] for i in rng.permutation(len(images))]


def _try_at(grid: OccupancyGrid, col: int, row: int, shapes: Sequence[BlockShape]) -> Optional[Placement]:
    for shape in shapes:
        if grid.can_fit(col, row, shape.cols, shape.rows):
            grid.occupy(col, row, shape.cols, shape.rows)
            return col, row, shape
    return None


def _fallback_search(grid: OccupancyGrid, shapes: Sequence[BlockShape], start_row: int) -> Optional[Placement]:
    """
    Запасной поиск: до columns*3 попыток; каждая перебирает формы
    в окне из 3 строк от start_row по всем колонкам (построчно).
    После неудачной попытки окно сдвигается к следующей свободной ячейке.
    """
    row0 = start_row
    for _ in range(grid.columns * FALLBACK_ATTEMPTS_PER_COLUMN):
        for shape in shapes:
            for row in range(row0, row0 + FALLBACK_ROW_WINDOW):
                for col in range(grid.columns):
                    if grid.can_fit(col, row, shape.cols, shape.rows):
                        grid.occupy(col, row, shape.cols, shape.rows)
                        return col, row, shape
        _, row0 = grid.next_free_position()
    return None


def _force_place(grid: OccupancyGrid) -> Placement:
    # 1×1 в первую свободную ячейку: влезает всегда, строки растут без ограничений
    col, row = grid.next_free_position()
    grid.ensure_rows(row + 1)
    grid.occupy(col, row, UNIT_SHAPE.cols, UNIT_SHAPE.rows)
    return col, row, UNIT_SHAPE


def place_image(grid: OccupancyGrid, image: ImageItem) -> PlacementRecord:
    shapes = rank_shapes(image.width / image.height)
    col, row = grid.next_free_position()

    placed = _try_at(grid, col, row, shapes)
    if placed is None:
        placed = _fallback_search(grid, shapes, row)
        if placed is not None:
            log.debug(f"[layout] {image.id}: fallback at col={placed[0]} row={placed[1]}")
    if placed is None:
        placed = _force_place(grid)
        log.debug(f"[layout] {image.id}: forced 1x1 at col={placed[0]} row={placed[1]}")

    col, row, shape = placed
    return PlacementRecord(
        **image.model_dump(),
        col_start=col + 1,  # CSS grid считает с 1
        row_start=row + 1,
        col_span=shape.cols,
        row_span=shape.rows,
    )


def bento_layout(images: Sequence[ImageItem],
                 columns: int = 6,
                 shuffle: bool = True,
                 seed: Optional[int] = None) -> List[PlacementRecord]:
    """
    Раскладывает картинки по сетке из `columns` колонок за один жадный проход.
    Каждой картинке: ровно одна запись; порядок записей = порядок обработки
    (после перемешивания, если shuffle=True). Уже поставленные блоки не двигаются.
    """
    _validate(images, columns, seed)
    items = shuffled(images, seed) if shuffle else list(images)

    grid = OccupancyGrid(columns)
    layout = [place_image(grid, img) for img in items]

    log.info(f"[layout] placed {len(layout)} images, columns={columns}, rows={len(grid)}, shuffle={shuffle}")
    return layout


def layout_stats(items: Sequence[PlacementRecord], columns: int) -> LayoutStats:
    """Заполненность сетки по готовой раскладке (сколько дыр, нет ли наложений)."""
    rows = max((it.row_start + it.row_span - 1 for it in items), default=0)
    cover = np.zeros((rows, columns), dtype=np.int32)
    for it in items:
        cover[it.row_start - 1:it.row_start - 1 + it.row_span,
              it.col_start - 1:it.col_start - 1 + it.col_span] += 1

    cells = rows * columns
    filled = int(np.count_nonzero(cover))
    return LayoutStats(
        rows=rows,
        cells=cells,
        filled=filled,
        empty=cells - filled,
        fill_ratio=(filled / cells) if cells else 0.0,
        max_overlap=int(cover.max()) if cover.size else 0,
    )
