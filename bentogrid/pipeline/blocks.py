# bentogrid/pipeline/blocks.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class BlockShape:
    cols: int
    rows: int

    @property
    def aspect(self) -> float:
        return self.cols / self.rows


# Порядок важен: при равной разнице по пропорциям побеждает тот, кто раньше.
# 1×1 всегда последний.
BLOCK_SHAPES: tuple[BlockShape, ...] = (
    BlockShape(2, 2),
    BlockShape(2, 1),
    BlockShape(1, 2),
    BlockShape(1, 1),
)

UNIT_SHAPE = BLOCK_SHAPES[-1]


def rank_shapes(aspect_ratio: float, shapes: Sequence[BlockShape] = BLOCK_SHAPES) -> List[BlockShape]:
    """Формы блоков по близости их пропорций (cols/rows) к aspect_ratio картинки."""
    # sorted() стабилен: ничьи сохраняют порядок каталога
    return sorted(shapes, key=lambda s: abs(s.aspect - aspect_ratio))
