# tests/test_blocks.py
from bentogrid.pipeline.blocks import BLOCK_SHAPES, BlockShape, UNIT_SHAPE, rank_shapes


def test_catalog_order():
    assert [(s.cols, s.rows) for s in BLOCK_SHAPES] == [(2, 2), (2, 1), (1, 2), (1, 1)]
    assert UNIT_SHAPE == BlockShape(1, 1)


def test_square_ties_keep_catalog_order():
    # 2×2 и 1×1 одинаково квадратные: 2×2 раньше в каталоге
    ranked = rank_shapes(1.0)
    assert ranked == [BlockShape(2, 2), BlockShape(1, 1), BlockShape(1, 2), BlockShape(2, 1)]


def test_landscape_prefers_wide_block():
    ranked = rank_shapes(1600 / 900)
    assert ranked[0] == BlockShape(2, 1)
    assert ranked[-1] == BlockShape(1, 2)


def test_portrait_prefers_tall_block():
    ranked = rank_shapes(900 / 1600)
    assert ranked[0] == BlockShape(1, 2)
    assert ranked[-1] == BlockShape(2, 1)


def test_equal_differences_are_stable():
    # 1.5: 2×2, 2×1 и 1×1 отстоят на 0.5
    assert rank_shapes(1.5) == [BlockShape(2, 2), BlockShape(2, 1), BlockShape(1, 1), BlockShape(1, 2)]


def test_ranking_is_total_and_pure():
    before = tuple(BLOCK_SHAPES)
    for ar in (0.1, 0.5, 1.0, 2.0, 7.5):
        assert sorted(rank_shapes(ar), key=BLOCK_SHAPES.index) == list(BLOCK_SHAPES)
    assert tuple(BLOCK_SHAPES) == before
