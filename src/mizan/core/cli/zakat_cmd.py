"""mizan nisab / evaluate / remind — thresholds, eligibility and reminders."""

from __future__ import annotations

import json

import click

from mizan.core.config_schema import MizanConfig
from mizan.zakat.eligibility import ZakatEligibilityEvaluator
from mizan.zakat.hijri_calendar import DualDate, format_dual_date
from mizan.zakat.money import round_money
from mizan.zakat.nisab import NisabStandard, compute_nisab
from mizan.zakat.reminders import check_reminder

from .common import parse_gregorian, parse_hijri, reported_errors

_STANDARDS = [standard.value for standard in NisabStandard]


def _price_options(func):
    func = click.option("--currency", default=None, help="Currency code (defaults to config zakat.currency).")(func)
    func = click.option("--silver", "silver_price", required=True, help="Silver price per gram.")(func)
    func = click.option("--gold", "gold_price", required=True, help="Gold price per gram.")(func)
    return func


def _snapshot(settings: MizanConfig, gold_price: str, silver_price: str, currency: str | None, as_of=None):
    return compute_nisab(
        gold_price,
        silver_price,
        currency or settings.zakat.currency,
        as_of_date=as_of,
        gold_grams=settings.zakat.gold_nisab_grams,
        silver_grams=settings.zakat.silver_nisab_grams,
    )


@click.command()
@_price_options
@click.pass_obj
def nisab(settings: MizanConfig, gold_price: str, silver_price: str, currency: str | None) -> None:
    """Show gold- and silver-based Nisab thresholds."""
    with reported_errors():
        snapshot = _snapshot(settings, gold_price, silver_price, currency)

    code = snapshot.currency
    click.echo(f"Gold ({snapshot.gold_grams} g):     {round_money(snapshot.gold_based_threshold, code)} {code}")
    click.echo(f"Silver ({snapshot.silver_grams} g): {round_money(snapshot.silver_based_threshold, code)} {code}")
    standard = settings.zakat.nisab_standard
    click.echo(f"In use ({standard.value}):      {round_money(snapshot.threshold(standard), code)} {code}")


@click.command()
@click.option("--wealth", required=True, help="Zakatable wealth (cash + zakatable income + investments - debts).")
@_price_options
@click.option("--anchor", default=None, help="Hawl anchor as a Hijri date, YYYY-MM-DD.")
@click.option("--today", default=None, help="Evaluate as of this Gregorian date, YYYY-MM-DD.")
@click.option("--standard", type=click.Choice(_STANDARDS), default=None, help="Nisab standard to apply.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_obj
def evaluate(
    settings: MizanConfig,
    wealth: str,
    gold_price: str,
    silver_price: str,
    currency: str | None,
    anchor: str | None,
    today: str | None,
    standard: str | None,
    as_json: bool,
) -> None:
    """Evaluate whether zakat is due and how much."""
    anchor_date = parse_hijri(anchor) if anchor else None
    today_date = parse_gregorian(today) if today else None

    with reported_errors():
        snapshot = _snapshot(settings, gold_price, silver_price, currency, as_of=today_date)
        evaluator = ZakatEligibilityEvaluator(standard=settings.zakat.nisab_standard, rate=settings.zakat.rate)
        result = evaluator.evaluate_from_anchor(
            wealth,
            snapshot,
            anchor_date,
            today=today_date,
            standard=NisabStandard(standard) if standard else None,
        )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    code = result.currency
    click.echo(f"Nisab ({result.nisab_standard.value}): {round_money(result.nisab_threshold, code)} {code}")
    click.echo(f"Zakatable wealth: {result.annual_savings} {code}")
    if result.next_zakat_date_hijri is None:
        click.echo("Hawl: no anchor date set")
    else:
        dual = format_dual_date(DualDate.from_hijri(result.next_zakat_date_hijri))
        click.echo(f"Hawl: {'complete' if result.hawl_complete else 'pending'}")
        click.echo(f"Next zakat date: {dual} ({result.days_until_zakat_date} days)")
    if result.eligible_to_receive:
        click.echo(f"Below nisab by {round_money(result.amount_to_reach_nisab, code)} {code}: eligible to receive zakat")
    click.echo(f"Obligatory: {'yes' if result.is_obligatory else 'no'}")
    click.echo(f"Zakat due: {result.zakat_amount_due} {code}")


@click.command()
@click.option("--anchor", required=True, help="Hawl anchor as a Hijri date, YYYY-MM-DD.")
@click.option("--today", default=None, help="Check as of this Gregorian date, YYYY-MM-DD.")
@click.option("--lead-days", type=int, default=None, help="Reminder window (defaults to config reminders.lead_days).")
@click.pass_obj
def remind(settings: MizanConfig, anchor: str, today: str | None, lead_days: int | None) -> None:
    """Say whether a zakat reminder is due for an anchor."""
    anchor_date = parse_hijri(anchor)
    today_date = parse_gregorian(today) if today else None
    window = settings.reminders.lead_days if lead_days is None else lead_days

    with reported_errors():
        reminder = check_reminder(anchor_date, today_date, lead_days=window)

    dual = format_dual_date(DualDate.from_hijri(reminder.due_date_hijri))
    click.echo(f"Next zakat date: {dual} ({reminder.days_until} days)")
    click.echo(f"Send reminder: {'yes' if reminder.should_send else 'no'} (window {window} days)")
