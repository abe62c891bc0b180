from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from uphill_calories.energy import calculate
from uphill_calories.models import RawInputs
from uphill_calories.render import result_payload

SCENARIOS = [
    ("reference", ("70", "5", "10", "30")),
    ("flat", ("70", "5", "0", "30")),
    ("comma", ("70,5", "4,8", "12,5", "45")),
    ("clamped", ("300", "12", "40", "900")),
    ("invalid", ("-1", "abc", "-5", "0")),
]


def main() -> None:
    for name, values in SCENARIOS:
        checked, result = calculate(RawInputs.from_text(*values), "en")
        print(f"{name}: inputs={values} -> {result_payload(checked, result)}")


if __name__ == "__main__":
    main()
