# bentogrid/pipeline/types.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List


class ImageItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    src: str
    width: float
    height: float


class PlacementRecord(ImageItem):
    # наружу отдаём camelCase (colStart/rowStart/...): так их ждёт CSS-grid рендер
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    col_start: int      # 1-индексация
    row_start: int
    col_span: int
    row_span: int


class LayoutStats(BaseModel):
    rows: int
    cells: int
    filled: int
    empty: int
    fill_ratio: float
    max_overlap: int


class LayoutRequest(BaseModel):
    images: List[ImageItem]
    columns: Optional[int] = None       # None → settings.GRID_COLUMNS
    shuffle: Optional[bool] = None      # None → settings.SHUFFLE
    seed: Optional[int] = Field(None, ge=0)


class LayoutResponse(BaseModel):
    columns: int
    items: List[PlacementRecord]
    stats: LayoutStats
