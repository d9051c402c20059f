"""
Command-line interface for propforecast.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, fields, is_dataclass
from datetime import date

from propforecast import __version__
from propforecast.core.errors import ConfigError
from propforecast.core.models import MilestoneFigures
from propforecast.engine import (
    apply_stress_test,
    generate_summary,
    offset_savings,
    run_forecast,
    simulate_loan,
    summary_table,
)
from propforecast.loader import load_scenario

EXAMPLE_SCENARIO = {
    "id": "demo",
    "name": "Home plus one investment property",
    "start_date": "2026-01-01",
    "horizon_years": 30,
    "profile": {
        "name": "Demo Household",
        "date_of_birth": "1990-06-15",
        "retirement_age": 65,
        "inflation_cpi_pa": 0.025,
        "wage_growth_pa": 0.03,
        "return_super_pa": 0.07,
        "return_portfolio_pa": 0.08,
        "medicare_levy": 0.02,
        "state_code": "NSW",
        "salary_gross_pa_cents": 15_000_000,
        "savings_cents": 2_000_000,
        "super_balance_cents": 12_000_000,
        "investments_cents": 0,
        "living_expenses_monthly_cents": 450_000,
    },
    "properties": [
        {
            "id": "home",
            "name": "Home",
            "purchase_price_cents": 90_000_000,
            "purchase_date": "2022-03-01",
            "value_now_cents": 105_000_000,
            "value_growth_pa": 0.05,
            "maintenance_pct_of_value": 0.005,
            "rates_pa_cents": 250_000,
            "insurance_pa_cents": 180_000,
        },
        {
            "id": "unit",
            "name": "Investment Unit",
            "purchase_price_cents": 60_000_000,
            "purchase_date": "2024-08-01",
            "value_now_cents": 64_000_000,
            "value_growth_pa": 0.04,
            "maintenance_pct_of_value": 0.01,
            "strata_pa_cents": 400_000,
            "rates_pa_cents": 180_000,
            "insurance_pa_cents": 90_000,
            "land_tax_pa_cents": 150_000,
            "rent_pw_cents": 62_000,
            "vacancy_weeks_pa": 2,
        },
    ],
    "loans": [
        {
            "id": "home-loan",
            "property_id": "home",
            "start_date": "2026-01-01",
            "start_balance_cents": 70_000_000,
            "annual_rate": 0.0615,
            "io_years": 0,
            "term_years": 26,
            "offset_start_cents": 3_000_000,
            "offset_contrib_monthly_cents": 100_000,
            "allow_redraw": False,
        },
        {
            "id": "unit-loan",
            "property_id": "unit",
            "start_date": "2026-01-01",
            "start_balance_cents": 48_000_000,
            "annual_rate": 0.0649,
            "io_years": 3,
            "term_years": 30,
        },
    ],
    "stress_rate_bump_pct": 2.0,
    "stress_growth_haircut_pct": 1.5,
    "stress_vacancy_weeks": 6,
}


class RecordEncoder(json.JSONEncoder):
    """JSON encoder that handles dates and dataclass records."""

    def default(self, obj):
        if isinstance(obj, date):
            return obj.isoformat()
        if is_dataclass(obj) and not isinstance(obj, type):
            return asdict(obj)
        return super().default(obj)


def _dollars(cents: int) -> str:
    return f"${cents / 100:,.0f}"


def _print_summary_table(table: dict[str, MilestoneFigures], title: str) -> None:
    """Print milestone figures as a fixed-width table."""
    labels = list(table)
    print(title)
    print(f"{'':<24}" + "".join(f"{label:>18}" for label in labels))
    for f in fields(MilestoneFigures):
        row = f"{f.name:<24}"
        row += "".join(
            f"{_dollars(getattr(table[label], f.name)):>18}" for label in labels
        )
        print(row)


def cmd_example(_) -> int:
    """Print an example scenario JSON."""
    json.dump(EXAMPLE_SCENARIO, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def cmd_run(args) -> int:
    """Run the forecast for a scenario file and print or export the results."""
    try:
        scenario = load_scenario(args.input)
        if args.stress:
            scenario = apply_stress_test(scenario)

        forecast = run_forecast(scenario)
        as_of = date.fromisoformat(args.as_of) if args.as_of else None
        summary = generate_summary(
            forecast,
            scenario.profile.retirement_age,
            scenario.profile.date_of_birth,
            as_of=as_of,
        )

        if args.output:
            payload = {
                "scenario_id": scenario.id,
                "stressed": bool(args.stress),
                "summary": summary_table(summary),
                "forecast": forecast,
            }
            with open(args.output, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, cls=RecordEncoder)
            print(f"Results saved to {args.output}")
        else:
            title = f"{scenario.name} ({'stressed' if args.stress else 'base'})"
            _print_summary_table(summary_table(summary), title)
        return 0

    except Exception as e:
        print(f"Error running scenario: {e}", file=sys.stderr)
        return 1


def cmd_loan(args) -> int:
    """Print schedule totals and offset savings for one loan."""
    try:
        scenario = load_scenario(args.input)
        loan = scenario.loan(args.loan_id)
        if loan is None:
            raise ConfigError(f"unknown loan '{args.loan_id}'")

        schedule = simulate_loan(loan, args.months)
        saved = offset_savings(loan, args.months)
        last = schedule.months[-1] if schedule.months else None

        print(f"Loan {loan.id}: {len(schedule.months)} months simulated")
        print(f"  Total interest:  {_dollars(schedule.total_interest)}")
        print(f"  Total payments:  {_dollars(schedule.total_payments)}")
        print(f"  Offset savings:  {_dollars(saved)}")
        if last is not None:
            print(
                f"  Ending balance:  {_dollars(last.ending_balance)} "
                f"({last.date.isoformat()})"
            )
        return 0

    except Exception as e:
        print(f"Error simulating loan: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="propforecast",
        description="propforecast - long-horizon property and household forecasts",
    )
    parser.add_argument(
        "--version", action="version", version=f"propforecast {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    example_parser = subparsers.add_parser(
        "example", help="Print an example scenario JSON"
    )
    example_parser.set_defaults(func=cmd_example)

    run_parser = subparsers.add_parser(
        "run", help="Run the monthly forecast for a scenario file"
    )
    run_parser.add_argument(
        "-i", "--input", required=True, help="Input scenario file (.json/.yaml)"
    )
    run_parser.add_argument(
        "-o", "--output", help="Write the full forecast to this JSON file"
    )
    run_parser.add_argument(
        "--stress", action="store_true", help="Apply the scenario's stress parameters"
    )
    run_parser.add_argument(
        "--as-of",
        help="Date current age is measured on (YYYY-MM-DD, default: scenario start)",
    )
    run_parser.set_defaults(func=cmd_run)

    loan_parser = subparsers.add_parser(
        "loan", help="Simulate one loan and report offset savings"
    )
    loan_parser.add_argument(
        "-i", "--input", required=True, help="Input scenario file (.json/.yaml)"
    )
    loan_parser.add_argument("--loan-id", required=True, help="Loan id to simulate")
    loan_parser.add_argument(
        "--months", type=int, default=None, help="Months to simulate (default: term)"
    )
    loan_parser.set_defaults(func=cmd_loan)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
