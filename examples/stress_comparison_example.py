"""
Base vs stressed forecast for the example household, with yearly figures,
KPIs and an optional net worth chart.
"""

from __future__ import annotations

from pathlib import Path

from propforecast import (
    apply_stress_test,
    compare_forecasts,
    forecast_to_frame,
    generate_summary,
    load_scenario,
    ltv,
    offset_savings,
    run_forecast,
    summary_table,
    to_freq,
)

HERE = Path(__file__).parent


def main() -> None:
    scenario = load_scenario(HERE / "household.yaml")
    stressed = apply_stress_test(scenario)

    base_fc = run_forecast(scenario)
    stress_fc = run_forecast(stressed)

    profile = scenario.profile
    for label, forecast in (("Base", base_fc), ("Stressed", stress_fc)):
        table = summary_table(
            generate_summary(forecast, profile.retirement_age, profile.date_of_birth)
        )
        print(f"\n{label}")
        for milestone, figures in table.items():
            nominal = figures.net_worth_nominal / 100
            today = figures.net_worth_pv / 100
            print(
                f"  {milestone:<12} net worth ${nominal:>14,.0f}"
                f"  (today's ${today:>12,.0f})"
            )

    yearly = to_freq(forecast_to_frame(base_fc), "Y")
    print("\nYearly net cashflow (base, $):")
    print((yearly["net_cashflow"] / 100).round(0).head(10).to_string())

    print("\nLTV at start and after 10 years:")
    base_ltv = ltv(forecast_to_frame(base_fc))
    print(f"  {base_ltv.iloc[0]:.2%} -> {base_ltv.iloc[119]:.2%}")

    home_loan = scenario.loan("home-loan")
    print(f"\nHome loan offset saves ${offset_savings(home_loan) / 100:,.0f} interest")

    try:
        from propforecast.charts import net_worth_vs_time

        fig, _ = net_worth_vs_time(
            compare_forecasts({"Base": base_fc, "Stressed": stress_fc})
        )
        fig.show()
    except ImportError as e:
        print(f"\nSkipping chart: {e}")


if __name__ == "__main__":
    main()
