import pytest

from imagecompare.core.search import concentric_squares


def test_distance_one_is_origin_only():
    assert concentric_squares(1) == ((0, 0),)


def test_first_ring_order():
    assert concentric_squares(2) == (
        (0, 0),
        (-1, 1),
        (0, 1),
        (1, 1),
        (1, 0),
        (1, -1),
        (0, -1),
        (-1, -1),
        (-1, 0),
    )


def test_rings_cover_square_without_duplicates():
    offsets = concentric_squares(5)
    assert len(offsets) == 9 * 9
    assert len(set(offsets)) == len(offsets)
    assert set(offsets) == {(dx, dy) for dx in range(-4, 5) for dy in range(-4, 5)}


def test_nearer_rings_come_first():
    offsets = concentric_squares(4)
    radii = [max(abs(dx), abs(dy)) for dx, dy in offsets]
    assert radii == sorted(radii)
    for level in range(1, 4):
        assert radii.count(level) == 8 * level


def test_rejects_non_positive_distance():
    with pytest.raises(ValueError):
        concentric_squares(0)
