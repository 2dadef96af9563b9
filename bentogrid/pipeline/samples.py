# bentogrid/pipeline/samples.py
from __future__ import annotations
from typing import List

from .types import ImageItem

_UNSPLASH = "https://images.unsplash.com/"

# Демо-набор: альбомные, портретные и квадратные картинки вперемешку
_SAMPLE_RAW = [
    ("1", "photo-1682687220742-aba13b6e50ba", 1200, 800),
    ("2", "photo-1682687221038-404cb8830901", 800, 1200),
    ("3", "photo-1682687220063-4742bd7fd538", 1000, 1000),
    ("4", "photo-1682687220923-c58b9a4592ae", 1600, 900),
    ("5", "photo-1682687221080-5cb261c645cb", 900, 1600),
    ("6", "photo-1682687220566-5599dbbebf11", 1200, 800),
    ("7", "photo-1682695796954-bad0d0f59ff1", 800, 800),
    ("8", "photo-1682687220198-88e9bdea9931", 1400, 1000),
    ("9", "photo-1682687220795-796d3f6f7000", 1000, 1400),
    ("10", "photo-1682687220801-eef408f95d71", 1200, 900),
    ("11", "photo-1682687221175-fd40bbafe6cb", 900, 1200),
    ("12", "photo-1682695794947-17061dc284dd", 1100, 800),
]

SAMPLE_IMAGES: List[ImageItem] = [
    ImageItem(id=i, src=_UNSPLASH + name, width=w, height=h) for i, name, w, h in _SAMPLE_RAW
]
