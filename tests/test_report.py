import json

import numpy as np

from imagecompare import CompareConfig, compare_images
from imagecompare.report import result_to_dict, result_to_json, write_json_report


def _pair():
    a = np.zeros((4, 4, 3), dtype=np.uint8)
    b = a.copy()
    b[1, 2] = 255
    return a, b


def test_mismatch_report_lists_boxes():
    a, b = _pair()
    result = compare_images(a, b, CompareConfig(max_search_distance=1))

    data = result_to_dict(result)

    assert data["outcome"] == "mismatch"
    assert data["passed"] is False
    assert data["failed_pixels"] == 2
    assert data["compared_units"] == 32
    assert data["forward_boxes"] == [[2, 1, 2, 1]]
    assert data["backward_boxes"] == [[2, 1, 2, 1]]
    assert json.loads(result_to_json(result)) == data


def test_match_report(tmp_path):
    a, _ = _pair()
    result = compare_images(a, a)
    path = tmp_path / "nested" / "report.json"

    write_json_report(result, path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["outcome"] == "match"
    assert data["passed"] is True
    assert data["forward_boxes"] == []
