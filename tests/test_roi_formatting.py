import math

import pytest

from src.config import settings
from src.core import roi_formatting
from src.core.roi_engine import compute_roi, default_inputs
from src.core.roi_formatting import (
    format_currency,
    format_payback,
    format_roi_pct,
    kpi_summary,
)
from src.core.roi_models import ROIInputs


@pytest.fixture(autouse=True)
def dollar_symbol(monkeypatch):
    monkeypatch.setattr(roi_formatting.settings, "CURRENCY_SYMBOL", "$")


@pytest.mark.parametrize(
    "value, expected",
    [
        (6000.0, "$6,000"),
        (1234567.4, "$1,234,567"),
        (-1500.0, "-$1,500"),
        (0.0, "$0"),
        (0.5, "$1"),
        (2.5, "$3"),
        (-1500.5, "-$1,501"),
        (-0.4, "$0"),
        (math.inf, "—"),
        (float("nan"), "—"),
    ],
)
def test_format_currency(value: float, expected: str):
    assert format_currency(value) == expected


def test_format_roi_pct():
    assert format_roi_pct(0.2) == "20%"
    assert format_roi_pct(-1.0) == "-100%"
    assert format_roi_pct(0.0) == "0%"


def test_format_payback():
    assert format_payback(10.0) == "10.0 mo"
    assert format_payback(65000 / 7000) == "9.3 mo"
    assert format_payback(math.inf) == settings.UNREACHABLE_LABEL


def test_kpi_summary_default_inputs():
    summary = kpi_summary(compute_roi(default_inputs()))

    assert list(summary) == [
        settings.KPI_MONTHLY_SAVINGS_LABEL,
        settings.KPI_ROI_12_LABEL,
        settings.KPI_PAYBACK_LABEL,
        settings.KPI_NPV_LABEL,
    ]
    assert summary[settings.KPI_MONTHLY_SAVINGS_LABEL] == "$7,000"
    assert summary[settings.KPI_ROI_12_LABEL] == "29%"
    assert summary[settings.KPI_PAYBACK_LABEL] == "9.3 mo"
    assert summary[settings.KPI_NPV_LABEL].startswith("$")


def test_kpi_summary_unreachable_payback():
    result = compute_roi(
        ROIInputs(
            disposal=0.0,
            consumables=0.0,
            reduction_pct=0.0,
            impl_cost=50000.0,
            opex_delta=0.0,
            discount_rate_pct=10.0,
            horizon_years=2.0,
        )
    )
    summary = kpi_summary(result)
    assert summary[settings.KPI_PAYBACK_LABEL] == "—"
    assert summary[settings.KPI_ROI_12_LABEL] == "-100%"
    assert summary[settings.KPI_NPV_LABEL] == "-$50,000"
