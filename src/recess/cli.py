"""Recess CLI - burnout risk and break planning."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.json_blocks import BlockStoreError
from .config import load_config
from .core.breaks import SuggestedBreak
from .core.burnout import RiskLevel
from .core.conflicts import ProposedInterval
from .core.timeline import ActivityBlock, BlockKind, Dated, Recurring, format_time_12h, parse_time
from .workflows import (
    accept_breaks,
    assess_day,
    blocks_for_day,
    check_proposal,
    get_block_store,
    get_explainer,
    suggest_breaks,
)

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

date_option = click.option(
    "--date", "-d", "target_date", default=None,
    help="Date (YYYY-MM-DD), defaults to today",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


def _parse_date(value: str | None, param_hint: str = "--date") -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}", param_hint=param_hint)


def _parse_weekday(value: str | None) -> int | None:
    if value is None:
        return None
    value = value.strip().lower()
    if value.isdigit() and int(value) < 7:
        return int(value)
    for i, name in enumerate(WEEKDAYS):
        if len(value) >= 3 and name.startswith(value):
            return i
    raise click.BadParameter(f"Unknown weekday {value!r}", param_hint="--weekday")


def _block_dict(block: ActivityBlock) -> dict:
    return block.to_row()


def _break_dict(b: SuggestedBreak) -> dict:
    return {
        "title": b.title,
        "type": b.kind.value,
        "start_time": b.start.strftime("%H:%M"),
        "end_time": b.end.strftime("%H:%M"),
        "date": b.date.isoformat(),
    }


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="recess")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Recess - burnout risk and break planning."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@date_option
@json_option
def blocks(target_date: str | None, as_json: bool):
    """List blocks scheduled for a day."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        day = blocks_for_day(config, target)
    except BlockStoreError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([_block_dict(b) for b in day], indent=2))
        return

    if not day:
        click.echo(f"No blocks on {target.strftime('%A, %b %d')}.")
        return

    click.echo(f"### {target.strftime('%A, %B %d')}")
    for b in day:
        repeat = " (weekly)" if b.is_recurring else ""
        click.echo(f"  {format_time_12h(b.start):>8} - {format_time_12h(b.end):>8}  [{b.kind.value}] {b.title}{repeat}")


@main.command()
@date_option
@click.option("--explain", is_flag=True, help="Ask the language service for a richer reason")
@json_option
def risk(target_date: str | None, explain: bool, as_json: bool):
    """Show burnout risk for a day."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        result = assess_day(config, target, explain=explain)
    except BlockStoreError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps({"date": target.isoformat(), "level": result.level.value, "reason": result.reason}, indent=2))
        return

    marker = {RiskLevel.LOW: "·", RiskLevel.MEDIUM: "!", RiskLevel.HIGH: "!!!"}[result.level]
    click.echo(f"[{marker:3}] {result.level.value.upper()} risk - {result.reason}")


@main.command()
@date_option
@click.option("--accept", is_flag=True, help="Save the suggested breaks to the timetable")
@json_option
def breaks(target_date: str | None, accept: bool, as_json: bool):
    """Suggest recovery breaks for a day."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        plan = suggest_breaks(config, target)
    except BlockStoreError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([_break_dict(b) for b in plan], indent=2))
    elif not plan:
        click.echo("No breaks to suggest.")
    else:
        for b in plan:
            click.echo(f"• {b.format()}")

    if accept and plan:
        report = accept_breaks(config, plan)
        for b, clashes in report.items():
            names = ", ".join(c.title or "(untitled)" for c in clashes)
            click.echo(f"Warning: {b.title} at {b.start.strftime('%H:%M')} overlaps {names}", err=True)
        click.echo(f"Saved {len(plan)} break(s).", err=as_json)


@main.command()
@click.argument("start")
@click.argument("end")
@date_option
@click.option("--weekday", "-w", default=None, help="Check a weekly proposal on this weekday")
@click.option("--until", default=None, help="Last date of the weekly proposal (YYYY-MM-DD)")
@json_option
def check(
    start: str,
    end: str,
    target_date: str | None,
    weekday: str | None,
    until: str | None,
    as_json: bool,
):
    """Check a proposed START-END interval for conflicts."""
    config = load_config()
    repeat_on = _parse_weekday(weekday)
    if until and repeat_on is None:
        raise click.UsageError("--until needs --weekday")
    proposed = ProposedInterval(
        start=parse_time(start),
        end=parse_time(end),
        date=_parse_date(target_date),
        weekday=repeat_on,
        end_date=_parse_date(until, "--until") if until else None,
    )
    try:
        clashes = check_proposal(config, proposed)
    except BlockStoreError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([_block_dict(b) for b in clashes], indent=2))
        return

    if not clashes:
        click.echo("No conflicts.")
        return

    click.echo(f"{len(clashes)} conflict(s):")
    for b in clashes:
        click.echo(f"  {b.format()}")


@main.command()
@click.argument("title")
@click.argument("start")
@click.argument("end")
@click.option(
    "--kind", "-k", default="other",
    type=click.Choice([k.value for k in BlockKind]),
    help="Block type",
)
@date_option
@click.option("--weekday", "-w", default=None, help="Repeat weekly on this weekday")
@click.option("--until", default=None, help="Last date of a weekly block (YYYY-MM-DD)")
@click.option("--force", is_flag=True, help="Add without confirming conflicts")
def add(
    title: str,
    start: str,
    end: str,
    kind: str,
    target_date: str | None,
    weekday: str | None,
    until: str | None,
    force: bool,
):
    """Add a block to the timetable."""
    config = load_config()
    day = _parse_date(target_date)
    repeat_on = _parse_weekday(weekday)
    if until and repeat_on is None:
        raise click.UsageError("--until needs --weekday")
    last_day = _parse_date(until, "--until") if until else None

    block = ActivityBlock(
        title=title,
        kind=BlockKind(kind),
        start=parse_time(start),
        end=parse_time(end),
        occurrence=(
            Recurring(repeat_on, last_day)
            if repeat_on is not None
            else Dated(day)
        ),
    )
    if block.end <= block.start:
        raise click.UsageError("END must be after START")

    try:
        clashes = check_proposal(config, ProposedInterval(block.start, block.end, day, repeat_on, last_day))
        if clashes and not force:
            click.echo("This overlaps:")
            for c in clashes:
                click.echo(f"  {c.format()}")
            if not click.confirm("Add anyway?"):
                click.echo("Not added.")
                return
        get_block_store(config).save_blocks([block])
    except BlockStoreError as e:
        _fail(str(e))

    click.echo(f"Added {block.format()}")


@main.command()
@click.argument("break_type")
@click.option("--minutes", "-m", default=15, show_default=True, help="Break length")
def tip(break_type: str, minutes: int):
    """Get a quick tip for a break."""
    config = load_config()
    click.echo(get_explainer(config).suggest_break_tip(break_type, minutes))
