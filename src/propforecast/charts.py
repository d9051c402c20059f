"""
Chart functions for forecasts and loan schedules.

All chart functions return (figure, tidy_dataframe_used). Amounts are
plotted in dollars; the frames passed in hold cents.
"""

from __future__ import annotations

import pandas as pd

# Plotly imports with graceful fallback
try:
    import plotly.express as px
    import plotly.graph_objects as go

    PLOTLY_AVAILABLE = True
except ImportError:
    PLOTLY_AVAILABLE = False


def _check_plotly() -> None:
    """Check if Plotly is available and raise helpful error if not."""
    if not PLOTLY_AVAILABLE:
        raise ImportError(
            "Plotly is required for chart functions. Install with:\n"
            "pip install plotly kaleido\n"
            "or\n"
            "pip install 'propforecast[viz]'"
        )


def _to_dollars(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    out = df.copy()
    for col in columns:
        out[col] = out[col] / 100.0
    return out


def net_worth_vs_time(
    tidy: pd.DataFrame, present_value: bool = False
) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot net worth over time for one or more scenarios.

    **Args:**
        tidy: DataFrame from ``compare_forecasts`` (date, scenario, forecast columns)
        present_value: Plot net worth in today's dollars instead of nominal

    **Returns:**
        Tuple of (plotly_figure, tidy_dataframe_used)

    **Example:**
        ```python
        tidy = compare_forecasts({"Base": base, "Stress": stressed})
        fig, data = net_worth_vs_time(tidy)
        fig.show()
        ```
    """
    _check_plotly()

    column = "net_worth_present_value" if present_value else "net_worth"
    data = _to_dollars(tidy, [column])
    fig = px.line(
        data,
        x="date",
        y=column,
        color="scenario",
        title="Net Worth (Today's $)" if present_value else "Net Worth Over Time",
        labels={column: "Net Worth ($)", "date": "Date"},
    )
    fig.update_layout(hovermode="x unified", legend_title="Scenario")
    return fig, data


def loan_balance_over_time(schedule_df: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot loan balance against the offset balance for one or more schedules.

    Args:
        schedule_df: Frame(s) from ``schedule_to_frame`` (concatenate for several loans)

    Returns:
        Tuple of (plotly_figure, tidy_dataframe_used)
    """
    _check_plotly()

    data = schedule_df.reset_index()
    data["date"] = data["month"].dt.to_timestamp()
    data = _to_dollars(data, ["ending_balance", "offset_balance"])
    tidy = data.melt(
        id_vars=["date", "loan_id"],
        value_vars=["ending_balance", "offset_balance"],
        var_name="series",
        value_name="amount",
    )
    fig = px.line(
        tidy,
        x="date",
        y="amount",
        color="loan_id",
        line_dash="series",
        title="Loan and Offset Balances",
        labels={"amount": "Balance ($)", "date": "Date"},
    )
    fig.update_layout(hovermode="x unified", legend_title="Loan")
    return fig, tidy


def save_chart(fig: go.Figure, filename: str, format: str = "html") -> None:
    """
    Save chart to file.

    Args:
        fig: Plotly figure
        filename: Output filename
        format: Output format ('html', 'png', 'pdf', 'svg')
    """
    _check_plotly()

    if format == "html":
        fig.write_html(filename)
    elif format in {"png", "pdf", "svg"}:
        fig.write_image(filename, format=format)
    else:
        raise ValueError(f"Unsupported format: {format}")
