"""famcal CLI - family calendar views."""

import json
import logging
import sys
from datetime import date, datetime

import click

from .adapters.json_store import CalendarDataError
from .config import Config, get_source, load_config
from .core.events import Event, Participant
from .core.layout import EventBox, LayoutMode, layout_day
from .core.selection import select_events, select_in_window
from .core.stats import aggregate_participant_stats
from .core.views import (
    build_day,
    build_month,
    build_schedule,
    build_week,
    event_participants,
    format_time_range,
)
from .core.window import Direction, ViewMode, advance, resolve_window

VIEW_CHOICES = click.Choice([m.value for m in ViewMode], case_sensitive=False)


@click.group()
@click.version_option(package_name="famcal")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """famcal - Family calendar CLI."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _anchor(target_date: str | None, config: Config) -> date:
    if target_date:
        return date.fromisoformat(target_date)
    return config.reference_date()


def _load(config: Config) -> tuple[list[Participant], list[Event]]:
    source = get_source(config)
    return source.load_participants(), source.load_events()


def _active_ids(users: str | None, config: Config, participants: list[Participant]) -> list[str]:
    if users:
        return [u.strip() for u in users.split(",") if u.strip()]
    if config.active_participants:
        return config.active_participants
    return [p.id for p in participants]


def _event_json(e: Event) -> dict:
    return {
        "id": e.id,
        "title": e.title,
        "start": e.start.isoformat(),
        "end": e.end.isoformat(),
        "location": e.location,
        "participants": e.attributed_ids,
        "all_day": e.is_all_day,
        "holiday": e.is_holiday,
    }


def _box_json(box: EventBox) -> dict:
    return {
        "event": _event_json(box.event),
        "top": box.top,
        "height": box.height,
        "left": box.left,
        "width": box.width,
        "slot": box.slot_index,
        "slots": box.total_slots,
    }


def _event_line(e: Event, participants: list[Participant]) -> str:
    loc = f" @ {e.location}" if e.location else ""
    initials = "".join(p.initial for p in event_participants(e, participants))
    who = f" [{initials}]" if initials else ""
    return f"  {format_time_range(e):20} {e.title}{loc}{who}"


def _render_text(
    mode: ViewMode,
    anchor: date,
    events: list[Event],
    participants,
    config: Config,
    layout_mode: LayoutMode,
):
    today = config.reference_date()

    if mode == ViewMode.DAY:
        agenda = build_day(anchor, events)
        click.echo(f"### {agenda.date.strftime('%a %d')}")
        if not agenda.items:
            click.echo("  No events for this day")
        for e in agenda.items:
            click.echo(_event_line(e, participants))

    elif mode == ViewMode.SCHEDULE:
        schedule = build_schedule(
            anchor, events, hour_height=config.hour_height, mode=layout_mode
        )
        click.echo(f"### {schedule.date.strftime('%b')} {schedule.date.day}")
        for e in schedule.all_day:
            click.echo(_event_line(e, participants))
        for box in schedule.boxes:
            slot = f" (slot {box.slot_index + 1}/{box.total_slots})" if box.total_slots > 1 else ""
            click.echo(f"{_event_line(box.event, participants)}{slot}")
        if not schedule.all_day and not schedule.boxes:
            click.echo("  No events")

    elif mode == ViewMode.WEEK:
        week = build_week(anchor, events, today)
        for column in week.days:
            marker = " (today)" if column.is_today else ""
            click.echo(f"### {column.date.strftime('%a %b')} {column.date.day}{marker}")
            for e in column.events:
                click.echo(_event_line(e, participants))
        click.echo(f"### Next Week: {week.next_week_label}")

    else:
        cells = build_month(anchor, events, today, max_events=config.month_cell_limit)
        click.echo(f"### {anchor.strftime('%B %Y')}")
        for cell in cells:
            if not cell.holidays and not cell.events:
                continue
            marker = " (today)" if cell.is_today else ""
            click.echo(f"{cell.date.strftime('%b %d')}{marker}")
            for h in cell.holidays:
                click.echo(f"  * {h.title}")
            for e in cell.events:
                click.echo(_event_line(e, participants))
            if cell.overflow:
                click.echo(f"  +{cell.overflow} more")


@main.command()
@click.option("--view", "view_name", type=VIEW_CHOICES, default=None, help="View mode")
@click.option("--date", "-d", "target_date", default=None, help="Anchor date (YYYY-MM-DD)")
@click.option("--users", default=None, help="Comma-separated participant ids to show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def view(view_name: str | None, target_date: str | None, users: str | None, as_json: bool):
    """Show the calendar for a view."""
    config = load_config()
    try:
        mode = ViewMode.parse(view_name or config.default_view)
        anchor = _anchor(target_date, config)
        layout_mode = LayoutMode.parse(config.layout_mode)
        participants, events = _load(config)
    except (CalendarDataError, ValueError) as e:
        _fail(str(e))

    window = resolve_window(anchor, mode)
    active = select_events(events, _active_ids(users, config, participants))

    if as_json:
        click.echo(
            json.dumps(
                {
                    "view": mode.value,
                    "window": {"start": window.start.isoformat(), "end": window.end.isoformat()},
                    "events": [_event_json(e) for e in select_in_window(active, window)],
                },
                indent=2,
            )
        )
        return

    # Builders bucket by day themselves; the month grid also shows padding days
    _render_text(mode, anchor, active, participants, config, layout_mode)


@main.command()
@click.argument("direction", type=click.Choice([d.value for d in Direction], case_sensitive=False))
@click.option("--view", "view_name", type=VIEW_CHOICES, default=None, help="View mode")
@click.option("--date", "-d", "target_date", default=None, help="Anchor date (YYYY-MM-DD)")
def nav(direction: str, view_name: str | None, target_date: str | None):
    """Print the anchor date after navigating prev/next/today."""
    config = load_config()
    try:
        mode = ViewMode.parse(view_name or config.default_view)
        anchor = _anchor(target_date, config)
    except ValueError as e:
        _fail(str(e))

    new_anchor = advance(anchor, mode, direction, today=config.reference_date())
    if isinstance(new_anchor, datetime):
        new_anchor = new_anchor.date()
    click.echo(new_anchor.isoformat())


@main.command()
@click.option("--view", "view_name", type=VIEW_CHOICES, default=None, help="View mode")
@click.option("--date", "-d", "target_date", default=None, help="Anchor date (YYYY-MM-DD)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(view_name: str | None, target_date: str | None, as_json: bool):
    """Count events per participant in the current view."""
    config = load_config()
    try:
        mode = ViewMode.parse(view_name or config.default_view)
        anchor = _anchor(target_date, config)
        participants, events = _load(config)
    except (CalendarDataError, ValueError) as e:
        _fail(str(e))

    counts = aggregate_participant_stats(events, resolve_window(anchor, mode), participants)

    if as_json:
        click.echo(
            json.dumps(
                {
                    pid: {"totalTasks": s.total_tasks, "completedTasks": s.completed_tasks}
                    for pid, s in counts.items()
                },
                indent=2,
            )
        )
        return

    for p in participants:
        click.echo(f"{p.name:12} {counts[p.id].total_tasks}")


@main.command()
@click.option("--date", "-d", "target_date", default=None, help="Day to lay out (YYYY-MM-DD)")
@click.option("--connected", is_flag=True, help="Group overlaps by connected component")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def layout(target_date: str | None, connected: bool, as_json: bool):
    """Show slot assignments for a day's timed events."""
    config = load_config()
    try:
        day = _anchor(target_date, config)
        mode = LayoutMode.CONNECTED if connected else LayoutMode.parse(config.layout_mode)
        _, events = _load(config)
    except (CalendarDataError, ValueError) as e:
        _fail(str(e))

    boxes = layout_day(events, day, hour_height=config.hour_height, mode=mode)

    if as_json:
        click.echo(json.dumps([_box_json(b) for b in boxes], indent=2))
        return

    if not boxes:
        click.echo("No timed events.")
        return

    for b in boxes:
        click.echo(
            f"{b.event.id:>6} {format_time_range(b.event):20} "
            f"left={b.left:.1%} width={b.width:.1%} top={b.top:g} height={b.height:g}"
        )


@main.command()
def participants():
    """List the participant roster."""
    config = load_config()
    try:
        roster = get_source(config).load_participants()
    except CalendarDataError as e:
        _fail(str(e))

    for p in roster:
        click.echo(f"{p.id:6} {p.name:12} {p.color.value}")


if __name__ == "__main__":
    main()
