from __future__ import annotations

import argparse
import os
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Literal, Sequence

if __package__ in (None, ""):
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from taxapp.core.federal import calculate_federal_tax
from taxapp.core.models import (
    Deduction,
    DeductionFinderInput,
    DeductionKind,
    DeductionResult,
    FilingStatus,
    StateTaxInput,
    StateTaxResult,
    TaxInput,
    TaxResult,
    TaxRulesQuery,
    TaxRulesResult,
)
from taxapp.core.rounding import round_cents
from taxapp.core.states import UnknownStateError, calculate_state_tax
from taxapp.core.tax_years import UnsupportedTaxYearError, get_tax_year_tables
from taxapp.optimize import find_deductions
from taxapp.rules import search_tax_rules

ColorPreference = Literal["auto", "always", "never"]

_KIND_PREFIXES = {
    "401k": DeductionKind.PRE_TAX_401K,
    "hsa": DeductionKind.PRE_TAX_HSA,
    "standard": DeductionKind.STANDARD,
    "itemized": DeductionKind.ITEMIZED,
}


def _make_console(pref: ColorPreference) -> Console:
    if pref == "auto" and os.getenv("NO_COLOR"):
        pref = "never"
    if pref == "never":
        return Console(no_color=True, highlight=False)
    return Console(force_terminal=pref == "always" or None)


def _money(value: Decimal) -> str:
    return f"${round_cents(value):,}"


def _percent(rate: Decimal) -> str:
    return f"{rate * 100:.2f}%"


def parse_amount(raw: str) -> Decimal:
    cleaned = raw.replace(",", "").replace("$", "").strip()
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"not a dollar amount: {raw!r}") from exc


def parse_deduction(raw: str) -> Deduction:
    """``LABEL=AMOUNT`` or ``KIND:LABEL=AMOUNT`` where KIND is 401k, hsa, standard or itemized."""
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"expected LABEL=AMOUNT, got {raw!r}")
    label, amount = raw.rsplit("=", 1)
    kind = None
    prefix, sep, rest = label.partition(":")
    if sep and prefix.lower() in _KIND_PREFIXES:
        kind, label = _KIND_PREFIXES[prefix.lower()], rest
    payload = {"label": label.strip(), "amount": parse_amount(amount)}
    if kind is not None:
        payload["kind"] = kind
    try:
        return Deduction.model_validate(payload)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _federal_deductions(args: argparse.Namespace) -> list[Deduction]:
    deductions = list(args.deduction or [])
    if args.standard:
        tables = get_tax_year_tables(args.tax_year)
        deductions.append(
            Deduction(
                label="Standard Deduction",
                amount=tables.standard_deductions[FilingStatus(args.filing_status)],
                kind=DeductionKind.STANDARD,
            )
        )
    return deductions


def render_federal(console: Console, result: TaxResult) -> None:
    table = Table(title="Federal brackets", expand=False)
    for column in ("Rate", "From", "To", "Taxed", "Tax"):
        table.add_column(column, justify="right")
    for row in result.bracket_breakdown:
        table.add_row(_percent(row.rate), _money(row.min), _money(row.max), _money(row.taxable_amount), _money(row.tax))
    console.print(table)
    summary = (
        f"Gross income: {_money(result.gross_income)}\n"
        f"Deductions: {_money(result.total_deductions)}\n"
        f"Taxable income: {_money(result.taxable_income)}\n"
        f"Federal tax: {_money(result.federal_tax)}\n"
        f"FICA: {_money(result.fica_tax)}\n"
        f"Effective rate: {_percent(result.effective_rate)}  Marginal rate: {_percent(result.marginal_rate)}\n"
        f"Take-home: {_money(result.take_home)}"
    )
    console.print(Panel(summary, title="Federal summary"))


def render_state(console: Console, result: StateTaxResult) -> None:
    if result.brackets:
        table = Table(title=f"{result.state_name} ({result.tax_type.value})", expand=False)
        for column in ("Rate", "From", "To", "Taxed", "Tax"):
            table.add_column(column, justify="right")
        for row in result.brackets:
            table.add_row(_percent(row.rate), _money(row.min), _money(row.max), _money(row.taxable_amount), _money(row.tax))
        console.print(table)
    lines = [
        f"State tax: {_money(result.state_tax)}",
        f"Effective rate: {_percent(result.state_effective_rate)}  Top rate: {_percent(result.top_rate)}",
        f"Standard deduction: {_money(result.standard_deduction)}",
    ]
    lines.extend(f"- {note}" for note in result.notable_credits)
    console.print(Panel("\n".join(lines), title=result.state_name))


def render_deductions(console: Console, result: DeductionResult) -> None:
    table = Table(title="Deduction opportunities", expand=False)
    table.add_column("Opportunity")
    table.add_column("Amount", justify="right")
    table.add_column("Annual savings", justify="right")
    table.add_column("Notes")
    for found in result.deductions:
        status = "" if found.applicable else "Not applicable: "
        table.add_row(found.name, _money(found.amount), _money(found.annual_savings), status + (found.reason or ""))
    console.print(table)
    console.print(
        Panel(
            f"Annual savings: {_money(result.total_annual_savings)} "
            f"({_money(result.total_monthly_savings)}/month)\n"
            f"New federal tax: {_money(result.new_federal_tax)}\n"
            f"New effective rate: {_percent(result.new_effective_rate)}\n"
            f"New take-home: {_money(result.new_take_home)}",
            title="Optimized",
        )
    )


def render_rules(console: Console, result: TaxRulesResult) -> None:
    for entry in result.results:
        console.print(Panel(entry.content, title=entry.title, subtitle=entry.source))


def _cmd_federal(args: argparse.Namespace, console: Console) -> int:
    result = calculate_federal_tax(
        TaxInput(
            gross_income=args.income,
            filing_status=args.filing_status,
            deductions=_federal_deductions(args),
            tax_year=args.tax_year,
        )
    )
    if args.json:
        console.print_json(result.model_dump_json())
    else:
        render_federal(console, result)
    return 0


def _cmd_state(args: argparse.Namespace, console: Console) -> int:
    result = calculate_state_tax(
        StateTaxInput(state_abbreviation=args.state, gross_income=args.income, filing_status=args.filing_status)
    )
    if args.json:
        console.print_json(result.model_dump_json())
    else:
        render_state(console, result)
    return 0


def _cmd_deductions(args: argparse.Namespace, console: Console) -> int:
    deductions = _federal_deductions(args)
    current_tax = args.current_tax
    if current_tax is None:
        current_tax = calculate_federal_tax(
            TaxInput(
                gross_income=args.income,
                filing_status=args.filing_status,
                deductions=deductions,
                tax_year=args.tax_year,
            )
        ).federal_tax
    result = find_deductions(
        DeductionFinderInput(
            gross_income=args.income,
            filing_status=args.filing_status,
            current_federal_tax=current_tax,
            current_deductions=deductions,
            has_student_loans=args.loan_balance is not None,
            loan_balance=args.loan_balance,
            has_hsa=args.hsa is not None,
            current_hsa_contribution=args.hsa,
            wants_ira=args.ira is not None,
            current_ira_contribution=args.ira,
            donates_charity=args.charity is not None,
            charity_amount=args.charity,
            has_dependents=bool(args.dependents),
            dependent_count=args.dependents,
            evaluate_401k=not args.skip_401k,
            tax_year=args.tax_year,
        )
    )
    if args.json:
        console.print_json(result.model_dump_json())
    else:
        render_deductions(console, result)
    return 0


def _cmd_rules(args: argparse.Namespace, console: Console) -> int:
    result = search_tax_rules(TaxRulesQuery(query=" ".join(args.query)))
    if args.json:
        console.print_json(result.model_dump_json())
    else:
        render_rules(console, result)
    return 0


def _cmd_serve(args: argparse.Namespace, console: Console) -> int:
    import uvicorn

    console.print(f"Serving the estimator API on http://{args.host}:{args.port}")
    uvicorn.run("taxapp.api.http:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def _add_income_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--income", type=parse_amount, required=True, help="Annual gross wages")
    parser.add_argument(
        "--filing-status",
        choices=[status.value for status in FilingStatus],
        default=FilingStatus.SINGLE.value,
    )
    parser.add_argument("--tax-year", type=int, default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taxapp", description="U.S. take-home tax estimator")
    parser.add_argument("--color", choices=["auto", "always", "never"], default="auto")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    federal = sub.add_parser("federal", help="Federal income tax, FICA and take-home pay")
    _add_income_args(federal)
    federal.add_argument(
        "--deduction",
        action="append",
        type=parse_deduction,
        metavar="[KIND:]LABEL=AMOUNT",
        help="Repeatable; KIND is 401k, hsa, standard or itemized",
    )
    federal.add_argument("--standard", action="store_true", help="Add the standard deduction for the filing status")
    federal.set_defaults(handler=_cmd_federal)

    state = sub.add_parser("state", help="State income tax")
    _add_income_args(state)
    state.add_argument("--state", required=True, help="Two-letter state code")
    state.set_defaults(handler=_cmd_state)

    finder = sub.add_parser("deductions", help="Find deductions and credits that lower federal tax")
    _add_income_args(finder)
    finder.add_argument("--deduction", action="append", type=parse_deduction, metavar="[KIND:]LABEL=AMOUNT")
    finder.add_argument("--standard", action="store_true")
    finder.add_argument("--current-tax", type=parse_amount, default=None, help="Defaults to the computed federal tax")
    finder.add_argument("--loan-balance", type=parse_amount, default=None, help="Outstanding student loan balance")
    finder.add_argument("--hsa", type=parse_amount, default=None, help="Current HSA contribution")
    finder.add_argument("--ira", type=parse_amount, default=None, help="Current traditional IRA contribution")
    finder.add_argument("--charity", type=parse_amount, default=None, help="Planned charitable donations")
    finder.add_argument("--dependents", type=int, default=0)
    finder.add_argument("--skip-401k", action="store_true", help="Do not suggest raising the 401(k) deferral")
    finder.set_defaults(handler=_cmd_deductions)

    rules = sub.add_parser("rules", help="Look up current limits, rates and deadlines")
    rules.add_argument("query", nargs="*", default=[])
    rules.set_defaults(handler=_cmd_rules)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(handler=_cmd_serve)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = _make_console(args.color)
    try:
        return args.handler(args, console)
    except (UnknownStateError, UnsupportedTaxYearError) as exc:
        console.print(f"[red]error:[/red] {exc}")
        return 2
    except ValidationError as exc:
        console.print(f"[red]invalid input:[/red] {exc}")
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
