# src/core/roi_formatting.py
from __future__ import annotations

import math
from typing import Dict

from src.config import settings
from src.core.roi_models import ROIResult


def _round_half_away(value: float) -> int:
    # Whole-currency display rounds .5 away from zero, not to even
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_currency(value: float) -> str:
    if value is None or not math.isfinite(value):
        return settings.UNREACHABLE_LABEL
    amount = _round_half_away(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{settings.CURRENCY_SYMBOL}{abs(amount):,.0f}"


def format_roi_pct(ratio: float) -> str:
    if ratio is None or not math.isfinite(ratio):
        return settings.UNREACHABLE_LABEL
    return f"{ratio * 100.0:.0f}%"


def format_payback(months: float) -> str:
    if months is None or math.isnan(months) or math.isinf(months):
        return settings.UNREACHABLE_LABEL
    return f"{months:.1f} {settings.PAYBACK_UNIT_LABEL}"


def kpi_summary(result: ROIResult) -> Dict[str, str]:
    """
    Display strings for the four KPI tiles, keyed by tile label in
    display order.
    """
    return {
        settings.KPI_MONTHLY_SAVINGS_LABEL: format_currency(result.monthly_savings),
        settings.KPI_ROI_12_LABEL: format_roi_pct(result.roi_12),
        settings.KPI_PAYBACK_LABEL: format_payback(result.payback_months),
        settings.KPI_NPV_LABEL: format_currency(result.npv),
    }
