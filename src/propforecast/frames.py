"""
pandas views of forecasts and loan schedules.

Frames are indexed by a monthly ``PeriodIndex`` named ``month`` so they line
up across scenarios and resample cleanly to quarters or years.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict

import pandas as pd

from propforecast.core.models import ForecastMonth, LoanSchedule

FORECAST_COLUMNS = [
    "salary_after_tax",
    "rental_income",
    "total_income",
    "living_expenses",
    "property_expenses",
    "loan_payments",
    "total_expenses",
    "net_cashflow",
    "cash_buffer",
    "property_values",
    "super_balance",
    "portfolio_balance",
    "total_assets",
    "total_debt",
    "net_worth",
    "net_worth_present_value",
    "passive_income_capacity",
]

SCHEDULE_COLUMNS = [
    "month",
    "starting_balance",
    "offset_balance",
    "effective_balance",
    "interest_charged",
    "principal_payment",
    "total_payment",
    "ending_balance",
    "is_interest_only",
]

# Flow columns are summed when resampling; everything else is a balance
FLOW_COLUMNS = {
    "salary_after_tax",
    "rental_income",
    "total_income",
    "living_expenses",
    "property_expenses",
    "loan_payments",
    "total_expenses",
    "net_cashflow",
    "passive_income_capacity",
}


def _period_index(dates) -> pd.PeriodIndex:
    return pd.DatetimeIndex(pd.to_datetime(list(dates))).to_period("M").rename("month")


def forecast_to_frame(forecast: Sequence[ForecastMonth]) -> pd.DataFrame:
    """
    Convert a forecast into a DataFrame (one row per month, cents as int64).

    Example:
        ```python
        df = forecast_to_frame(run_forecast(scenario))
        df["net_worth"].iloc[-1]
        ```
    """
    if not forecast:
        return pd.DataFrame(
            columns=FORECAST_COLUMNS, index=pd.PeriodIndex([], freq="M", name="month")
        )
    df = pd.DataFrame(
        [asdict(row) for row in forecast],
        index=_period_index(row.date for row in forecast),
    )
    return df[FORECAST_COLUMNS].astype("int64")


def to_freq(df: pd.DataFrame, freq: str = "Y") -> pd.DataFrame:
    """
    Resample a monthly forecast frame to quarters ("Q") or years ("Y").

    Flows are summed over the period, balances take the period's last value.
    """
    agg = {col: ("sum" if col in FLOW_COLUMNS else "last") for col in df.columns}
    return df.groupby(df.index.asfreq(freq)).agg(agg)


def schedule_to_frame(schedule: LoanSchedule) -> pd.DataFrame:
    """Convert a loan schedule into a DataFrame with a ``loan_id`` column."""
    if not schedule.months:
        df = pd.DataFrame(
            columns=SCHEDULE_COLUMNS, index=pd.PeriodIndex([], freq="M", name="month")
        )
    else:
        df = pd.DataFrame(
            [asdict(row) for row in schedule.months],
            index=_period_index(row.date for row in schedule.months),
        )[SCHEDULE_COLUMNS]
    df = df.rename(columns={"month": "loan_month"})
    df["loan_id"] = schedule.loan_id
    return df


def compare_forecasts(forecasts: Mapping[str, Sequence[ForecastMonth]]) -> pd.DataFrame:
    """
    Stack several forecasts into one tidy frame for side-by-side analysis.

    Args:
        forecasts: Mapping of scenario label to forecast (e.g. base and stressed)

    Returns:
        Long DataFrame with a ``date`` column, the forecast columns and a
        ``scenario`` column, one row per scenario-month
    """
    frames = []
    for label, forecast in forecasts.items():
        df = forecast_to_frame(forecast).reset_index()
        df["date"] = df["month"].dt.to_timestamp()
        df = df.drop(columns="month")
        df["scenario"] = label
        frames.append(df)

    if not frames:
        return pd.DataFrame(columns=["date", *FORECAST_COLUMNS, "scenario"])
    return pd.concat(frames, axis=0, ignore_index=True)
