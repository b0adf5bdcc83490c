"""JSON report helpers."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from .core.types import ComparisonResult


def result_to_dict(result: ComparisonResult) -> Dict[str, object]:
    return {
        "outcome": result.outcome.value,
        "passed": result.passed,
        "failed_pixels": result.failed_pixels,
        "compared_units": result.compared_units,
        "difference_ratio": result.difference_ratio,
        "forward_boxes": [list(box) for box in result.forward_boxes],
        "backward_boxes": [list(box) for box in result.backward_boxes],
    }


def write_json_report(result: ComparisonResult, path: str | Path) -> None:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    data = result_to_dict(result)
    with out_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, ensure_ascii=False, indent=2)


def result_to_json(result: ComparisonResult) -> str:
    return json.dumps(result_to_dict(result), ensure_ascii=False, indent=2)
