# src/config/settings.py

import os

# "dev" makes scripts/roi_report.py print the full cumulative series
APP_ENV = os.getenv("APP_ENV", "prod").lower()

# --- ROI calculator defaults ---
# Initial state of the calculator form (all values per month unless noted)
DEFAULT_DISPOSAL_PER_MONTH = 12000.0  # baseline waste, hauling, surcharges
DEFAULT_CONSUMABLES_PER_MONTH = 8000.0  # coolant / filters / chemicals
DEFAULT_REDUCTION_PCT = 35.0  # expected % reduction on disposal + consumables
DEFAULT_IMPL_COST = 65000.0  # one-time implementation cost
# Net OPEX change after adoption: +cost / -savings
DEFAULT_OPEX_DELTA_PER_MONTH = -1500.0
DEFAULT_DISCOUNT_RATE_PCT = 10.0  # annual
DEFAULT_HORIZON_YEARS = 3.0

# --- Projection ---
MONTHS_PER_YEAR = 12
MIN_PROJECTION_MONTHS = 1
# Positional label prefix for the cumulative series ("M1", "M2", ...)
SERIES_LABEL_PREFIX = "M"

# --- Display ---
CURRENCY_SYMBOL = os.getenv("ROI_CURRENCY_SYMBOL", "$")
UNREACHABLE_LABEL = "—"  # payback never reached / non-finite values
PAYBACK_UNIT_LABEL = "mo"

# KPI tile labels, in display order
KPI_MONTHLY_SAVINGS_LABEL = "Monthly Savings"
KPI_ROI_12_LABEL = "12-mo ROI"
KPI_PAYBACK_LABEL = "Payback"
KPI_NPV_LABEL = "NPV (horizon)"

# Cumulative cashflow chart: y-axis pad above max / below min
CASHFLOW_Y_PAD_PCT = 0.10

# Smoke script prints the whole series in dev
REPORT_PRINT_SERIES = APP_ENV == "dev"
