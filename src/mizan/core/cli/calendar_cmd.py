"""mizan to-hijri / to-gregorian — date conversion."""

from __future__ import annotations

import click

from mizan.zakat.hijri_calendar import DualDate, get_islamic_holiday

from .common import parse_gregorian, parse_hijri, reported_errors


def _echo_dual(dual: DualDate) -> None:
    click.echo(str(dual))
    click.echo(f"Hijri (storage form): {dual.hijri.isoformat()}")
    holiday = get_islamic_holiday(dual.hijri)
    if holiday.is_holiday:
        click.echo(f"Holiday: {holiday.name}")


@click.command("to-hijri")
@click.argument("gregorian_date")
def to_hijri(gregorian_date: str) -> None:
    """Convert a Gregorian date (YYYY-MM-DD) to the Hijri calendar."""
    value = parse_gregorian(gregorian_date)
    with reported_errors():
        _echo_dual(DualDate.from_gregorian(value))


@click.command("to-gregorian")
@click.argument("hijri_date")
def to_gregorian(hijri_date: str) -> None:
    """Convert a Hijri date (YYYY-MM-DD) to the Gregorian calendar."""
    hijri = parse_hijri(hijri_date)
    with reported_errors():
        _echo_dual(DualDate.from_hijri(hijri))
