# scripts/roi_report.py
"""
Print the calculator KPIs for the default assumptions.

Override any input with key=value pairs using the form field names, e.g.

    python scripts/roi_report.py impl=80000 horizon=5 opexDelta=250
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.config import settings  # noqa: E402
from src.core.cashflow_table import break_even_period  # noqa: E402
from src.core.roi_engine import (  # noqa: E402
    InvalidROIInputs,
    compute_roi,
    inputs_from_mapping,
)
from src.core.roi_formatting import format_currency, kpi_summary  # noqa: E402


def parse_overrides(args: List[str]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep:
            raise InvalidROIInputs(f"expected key=value, got {arg!r}")
        overrides[key.strip()] = value.strip()
    return overrides


def main(argv: List[str]) -> int:
    try:
        inputs = inputs_from_mapping(parse_overrides(argv))
    except InvalidROIInputs as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    result = compute_roi(inputs)

    print("=== ROI calculator ===")
    print(f"Baseline disposal (/mo): {format_currency(inputs.disposal)}")
    print(f"Baseline consumables (/mo): {format_currency(inputs.consumables)}")
    print(f"Expected reduction (%): {inputs.reduction_pct:,.1f}")
    print(f"Implementation cost: {format_currency(inputs.impl_cost)}")
    print(f"Monthly OPEX change: {format_currency(inputs.opex_delta)}")
    print(f"Discount rate (%/yr): {inputs.discount_rate_pct:,.1f}")
    print(f"Horizon (years): {inputs.horizon_years:,.1f}")
    print("-" * 40)
    for label, value in kpi_summary(result).items():
        print(f"{label:16}  {value:>14}")

    break_even = break_even_period(result)
    print(f"{'Break-even':16}  {break_even.label if break_even else '—':>14}")

    if settings.REPORT_PRINT_SERIES:
        print("-" * 40)
        for point in result.cumulative_series:
            print(f"{point.label:>5}  {point.cumulative:>14,}")

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
