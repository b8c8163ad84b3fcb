# src/core/roi_models.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ROIInputs:
    """
    Assumptions behind one ROI projection.

    Money fields are plain floats in the display currency. Percentages are
    expressed as percent, not fractions, e.g. 35.0 = 35%.
    """

    disposal: float  # baseline waste / disposal / hauling per month
    consumables: float  # baseline coolant / filters / chemicals per month
    reduction_pct: float  # applied to disposal + consumables
    impl_cost: float  # one-time
    opex_delta: float  # per month; +added cost, -extra savings
    discount_rate_pct: float  # annual
    horizon_years: float


@dataclass(frozen=True)
class CashflowPoint:
    period_index: int  # 1-based month
    label: str
    # Rounded cumulative net cashflow; inf / nan once the total overflows
    cumulative: float


@dataclass(frozen=True)
class ROIResult:
    """
    Output of compute_roi.

    payback_months is math.inf when monthly savings never recoup the
    implementation cost. roi_12 is a ratio (0.25 = 25%).
    """

    monthly_savings: float
    payback_months: float
    roi_12: float
    npv: float
    cumulative_series: List[CashflowPoint] = field(default_factory=list)

    @property
    def months(self) -> int:
        return len(self.cumulative_series)

    @property
    def payback_reachable(self) -> bool:
        return math.isfinite(self.payback_months)
