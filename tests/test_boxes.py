from imagecompare.core.boxes import BoxAccumulator, ComparisonBox


def test_first_point_creates_singleton_box():
    acc = BoxAccumulator(max_width=5, max_height=5)
    box = acc.add(3, 4)
    assert box == ComparisonBox(3, 4, 3, 4)
    assert acc.as_tuples() == ((3, 4, 3, 4),)


def test_points_within_limits_grow_the_same_box():
    acc = BoxAccumulator(max_width=5, max_height=5)
    acc.add(2, 2)
    acc.add(0, 4)
    acc.add(5, 1)
    assert acc.as_tuples() == ((0, 1, 5, 4),)


def test_points_beyond_limits_start_new_boxes():
    acc = BoxAccumulator(max_width=2, max_height=2)
    acc.add(0, 0)
    acc.add(5, 0)
    acc.add(2, 0)
    acc.add(3, 0)
    assert acc.as_tuples() == ((0, 0, 2, 0), (3, 0, 5, 0))


def test_first_fitting_box_wins_over_tighter_one():
    acc = BoxAccumulator(max_width=4, max_height=4)
    acc.add(0, 0)
    acc.add(6, 0)
    acc.add(4, 0)
    assert acc.as_tuples() == ((0, 0, 4, 0), (6, 0, 6, 0))


def test_height_limit_applies_independently():
    acc = BoxAccumulator(max_width=100, max_height=1)
    for y in range(4):
        acc.add(0, y)
    assert acc.as_tuples() == ((0, 0, 0, 1), (0, 2, 0, 3))


def test_boxes_respect_size_limits():
    acc = BoxAccumulator(max_width=3, max_height=2)
    for x in range(12):
        for y in range(0, 9, 2):
            acc.add(x, y)
    assert len(acc) > 1
    for box in acc.boxes:
        assert box.width <= 3
        assert box.height <= 2
    for x in range(12):
        for y in range(0, 9, 2):
            assert any(box.contains(x, y) for box in acc.boxes)
