"""
KPI helpers for forecast and loan schedule frames.

All functions take frames produced by ``propforecast.frames`` and return
pandas Series (or scalars for breakeven_month) aligned to the input index.
"""

from __future__ import annotations

import numpy as np
import pandas as pd


def ltv(
    df: pd.DataFrame,
    debt_col: str = "total_debt",
    property_value_col: str = "property_values",
) -> pd.Series:
    """
    Loan to value ratio: total debt / property values.

    Returns:
        Series with LTV (NaN where the household holds no property)
    """
    property_value = df[property_value_col]
    ratio = np.where(
        property_value > 0,
        df[debt_col] / property_value.where(property_value > 0, 1),
        np.nan,
    )
    return pd.Series(ratio, index=df.index, name="ltv")


def savings_rate(
    df: pd.DataFrame,
    income_col: str = "total_income",
    net_cashflow_col: str = "net_cashflow",
) -> pd.Series:
    """
    Share of income left over each month: net cashflow / total income.

    Returns:
        Series with savings rate (NaN where income <= 0)
    """
    income = df[income_col]
    rate = np.where(
        income > 0,
        df[net_cashflow_col] / income.where(income > 0, 1),
        np.nan,
    )
    return pd.Series(rate, index=df.index, name="savings_rate")


def liquidity_runway(
    df: pd.DataFrame,
    lookback_months: int = 6,
    cash_col: str = "cash_buffer",
    expenses_col: str = "total_expenses",
) -> pd.Series:
    """
    Months of spending the cash buffer covers.

    Runway = cash buffer / rolling mean of total expenses over
    ``lookback_months``. Infinite when there are no expenses; zero or
    negative once the buffer is overdrawn.
    """
    rolling = df[expenses_col].rolling(window=lookback_months, min_periods=1).mean()
    runway = np.where(
        rolling > 0,
        df[cash_col] / rolling.where(rolling > 0, 1),
        np.inf,
    )
    return pd.Series(runway, index=df.index, name="liquidity_runway_months")


def max_drawdown(series: pd.Series) -> float:
    """
    Largest peak-to-trough fall of a series, as a negative fraction of the peak.

    Peaks at or below zero are ignored (a drawdown from a negative net worth
    has no meaningful ratio). Returns 0.0 when the series never falls.
    """
    running_max = series.expanding().max()
    positive_peak = running_max > 0
    if not positive_peak.any():
        return 0.0
    drawdown = (series[positive_peak] - running_max[positive_peak]) / running_max[
        positive_peak
    ]
    return float(min(drawdown.min(), 0.0))


def interest_paid_cum(
    schedule_df: pd.DataFrame, interest_col: str = "interest_charged"
) -> pd.Series:
    """Cumulative interest over a loan schedule frame."""
    if interest_col not in schedule_df.columns:
        return pd.Series(0, index=schedule_df.index, name="interest_paid_cum")
    return schedule_df[interest_col].cumsum().rename("interest_paid_cum")


def breakeven_month(
    scenario_df: pd.DataFrame,
    baseline_df: pd.DataFrame,
    net_worth_col: str = "net_worth",
) -> int | None:
    """
    First 1-based month in which a scenario's net worth matches the baseline.

    Frames are aligned on their monthly index.

    Returns:
        Month number, or None if the scenario never catches up
    """
    merged = scenario_df[[net_worth_col]].join(
        baseline_df[[net_worth_col]],
        how="inner",
        lsuffix="_scenario",
        rsuffix="_baseline",
    )
    if merged.empty:
        return None

    advantage = (
        merged[f"{net_worth_col}_scenario"] - merged[f"{net_worth_col}_baseline"]
    )
    hits = np.where(advantage >= 0)[0]
    if len(hits) == 0:
        return None
    return int(hits[0]) + 1
