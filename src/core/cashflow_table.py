# src/core/cashflow_table.py
from __future__ import annotations

from typing import Optional, Tuple

import pandas as pd

from src.config import settings
from src.core.roi_models import CashflowPoint, ROIResult

CUMULATIVE_COLUMN = "Cumulative cashflow"


def cashflow_to_dataframe(result: ROIResult) -> pd.DataFrame:
    if not result.cumulative_series:
        return pd.DataFrame(columns=["Period", "Month", CUMULATIVE_COLUMN])
    return pd.DataFrame(
        [
            {
                "Period": p.period_index,
                "Month": p.label,
                CUMULATIVE_COLUMN: p.cumulative,
            }
            for p in result.cumulative_series
        ]
    )


def compute_cashflow_y_domain(
    df: pd.DataFrame, pad_pct: float | None = None
) -> Tuple[float, float]:
    """
    Compute a (lower, upper) y-domain for the cumulative cashflow chart.

    Unlike a revenue chart the series usually starts below zero, so both ends
    are padded and zero is always kept in view.
    """
    if pad_pct is None:
        pad_pct = settings.CASHFLOW_Y_PAD_PCT
    pad = max(0.0, pad_pct or 0.0)

    if df.empty or CUMULATIVE_COLUMN not in df.columns:
        return (0.0, 1.0)

    lower = min(0.0, float(df[CUMULATIVE_COLUMN].min()))
    upper = max(0.0, float(df[CUMULATIVE_COLUMN].max()))
    span = upper - lower
    if span <= 0:
        return (0.0, 1.0)
    return (lower - span * pad if lower < 0 else 0.0, upper + span * pad)


def break_even_period(result: ROIResult) -> Optional[CashflowPoint]:
    """
    First month whose rounded cumulative cashflow is back to zero or above,
    or None if that never happens within the horizon.
    """
    return next((p for p in result.cumulative_series if p.cumulative >= 0), None)
