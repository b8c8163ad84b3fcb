# src/core/roi_engine.py
"""
ROI projection engine

Derives the calculator's headline metrics from a fixed set of assumptions:

- Monthly savings are the expected % reduction on disposal + consumables,
  less any added OPEX. A negative opex_delta is already extra savings and is
  not subtracted a second time.
- Payback is implementation cost / monthly savings, or math.inf when savings
  are zero or negative.
- 12-month ROI is (12 months of savings - cost) / cost, and 0.0 when there is
  no implementation cost.
- NPV discounts each month's savings at the annual rate compounded monthly,
  with the implementation cost as the period-0 outflow. The cumulative
  series tracks the undiscounted running total over the same months.

compute_roi never raises for finite inputs and does not touch its arguments.
"""
from __future__ import annotations

import math
from typing import Any, List, Mapping

from src.config import settings
from src.core.roi_models import CashflowPoint, ROIInputs, ROIResult

# Form field names accepted by inputs_from_mapping, keyed to ROIInputs fields
_FIELD_ALIASES = {
    "disposal": "disposal",
    "consumables": "consumables",
    "reduction": "reduction_pct",
    "reduction_pct": "reduction_pct",
    "impl": "impl_cost",
    "impl_cost": "impl_cost",
    "opexDelta": "opex_delta",
    "opex_delta": "opex_delta",
    "rate": "discount_rate_pct",
    "discount_rate_pct": "discount_rate_pct",
    "horizon": "horizon_years",
    "horizon_years": "horizon_years",
}


class InvalidROIInputs(ValueError):
    """Raised when a form value cannot be read as a finite number."""


def _round_half_up(value: float) -> float:
    # Non-finite totals pass through as inf / nan
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def _discounted(amount: float, divisor: float) -> float:
    """
    amount / divisor with IEEE results instead of exceptions: a zero divisor
    gives a signed inf (nan for 0 / 0).
    """
    if divisor == 0:
        if amount == 0 or math.isnan(amount):
            return math.nan
        return math.copysign(math.inf, amount) * math.copysign(1.0, divisor)
    return amount / divisor


def _projection_months(horizon_years: float) -> int:
    """
    Number of monthly periods for the horizon, never fewer than one.
    """
    months = _round_half_up(horizon_years * settings.MONTHS_PER_YEAR)
    return max(settings.MIN_PROJECTION_MONTHS, months)


def compute_roi(inputs: ROIInputs) -> ROIResult:
    base_monthly = (inputs.disposal + inputs.consumables) * (
        inputs.reduction_pct / 100.0
    )
    monthly_savings = base_monthly - max(0.0, inputs.opex_delta)

    payback_months = (
        inputs.impl_cost / monthly_savings if monthly_savings > 0 else math.inf
    )
    # No cost means no meaningful ratio; 0.0 rather than inf
    roi_12 = (
        (monthly_savings * 12 - inputs.impl_cost) / inputs.impl_cost
        if inputs.impl_cost > 0
        else 0.0
    )

    monthly_rate = inputs.discount_rate_pct / 100.0 / settings.MONTHS_PER_YEAR
    months = _projection_months(inputs.horizon_years)

    npv = -inputs.impl_cost
    cumulative = -inputs.impl_cost
    series: List[CashflowPoint] = []
    for m in range(1, months + 1):
        try:
            divisor = (1.0 + monthly_rate) ** m
        except OverflowError:
            # Discount factor beyond float range; the term is effectively zero
            divisor = math.inf
        npv += _discounted(monthly_savings, divisor)
        cumulative += monthly_savings
        series.append(
            CashflowPoint(
                period_index=m,
                label=f"{settings.SERIES_LABEL_PREFIX}{m}",
                cumulative=_round_half_up(cumulative),
            )
        )

    return ROIResult(
        monthly_savings=monthly_savings,
        payback_months=payback_months,
        roi_12=roi_12,
        npv=npv,
        cumulative_series=series,
    )


def default_inputs() -> ROIInputs:
    """Initial calculator state, from settings."""
    return ROIInputs(
        disposal=settings.DEFAULT_DISPOSAL_PER_MONTH,
        consumables=settings.DEFAULT_CONSUMABLES_PER_MONTH,
        reduction_pct=settings.DEFAULT_REDUCTION_PCT,
        impl_cost=settings.DEFAULT_IMPL_COST,
        opex_delta=settings.DEFAULT_OPEX_DELTA_PER_MONTH,
        discount_rate_pct=settings.DEFAULT_DISCOUNT_RATE_PCT,
        horizon_years=settings.DEFAULT_HORIZON_YEARS,
    )


def inputs_from_mapping(values: Mapping[str, Any]) -> ROIInputs:
    """
    Build ROIInputs from a form record.

    Accepts the form's field names (disposal, consumables, reduction, impl,
    opexDelta, rate, horizon) or the ROIInputs field names. Unknown keys are
    ignored and missing ones keep their default. Numeric strings are
    accepted; anything that is not a finite number raises InvalidROIInputs.
    """
    defaults = default_inputs()
    fields = {
        name: getattr(defaults, name) for name in set(_FIELD_ALIASES.values())
    }

    for key, raw in values.items():
        name = _FIELD_ALIASES.get(key)
        if name is None:
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidROIInputs(f"{key}: expected a number, got {raw!r}") from exc
        if not math.isfinite(value):
            raise InvalidROIInputs(f"{key}: expected a finite number, got {raw!r}")
        fields[name] = value

    return ROIInputs(**fields)
