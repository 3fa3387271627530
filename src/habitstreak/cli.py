"""Command-line interface for HabitStreak."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import click

from .clock import FixedClock, SystemClock
from .config import BaseConfig
from .context import AppContext, create_app_context
from .logging_config import setup_logging
from .models.habit import Habit
from .services.export_csv import export_habits_csv
from .services.habit_store import HabitStoreError
from .services.navigation import DayCursor, status_symbol
from .services.stats import format_rate, summarize


def _parse_day(ctx, param, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise click.BadParameter("expected YYYY-MM-DD") from exc


def _parse_today(ctx, param, value: str | None) -> date | None:
    day = _parse_day(ctx, param, value)
    if day is not None and day > SystemClock().today():
        raise click.BadParameter("cannot be later than the current date")
    return day


def _require_habit(app: AppContext, habit_id: str) -> Habit:
    habit = app.registry.get(habit_id)
    if habit is None:
        raise click.ClickException(f"No habit with id {habit_id}")
    return habit


@click.group()
@click.option(
    "--today", callback=_parse_today, help="Treat this past date (YYYY-MM-DD) as today."
)
@click.pass_context
def cli(ctx: click.Context, today: date | None) -> None:
    """Track daily habits and their streaks."""

    if ctx.obj is None:
        config = BaseConfig()
        setup_logging(config)
        clock = FixedClock(today) if today else SystemClock()
        try:
            ctx.obj = create_app_context(config, clock=clock)
        except HabitStoreError as exc:
            raise click.ClickException(str(exc)) from exc
        ctx.call_on_close(ctx.obj.close)


@cli.command("list")
@click.option("--date", "day", callback=_parse_day, help="Day to show (YYYY-MM-DD); defaults to today.")
@click.pass_obj
def list_habits(app: AppContext, day: date | None) -> None:
    """Show habits with the day's status and current streak."""

    cursor = DayCursor(app.clock, day)
    if not len(app.registry):
        click.echo("No habits yet. Add one with: habitstreak add NAME")
        return
    click.echo(cursor.label)
    for habit in app.registry:
        symbol = status_symbol(habit.state_on(cursor.selected)) or " "
        click.echo(f"[{symbol}] {habit.id}  {habit.name}  streak {habit.streak} (best {habit.best_streak})")


@cli.command()
@click.argument("name")
@click.option("--color", default=None, help="Hex accent color; random from the palette if omitted.")
@click.pass_obj
def add(app: AppContext, name: str, color: str | None) -> None:
    """Add a habit."""

    habit = app.registry.add(name, color=color)
    if habit is None:
        raise click.ClickException("Habit name must not be blank")
    click.echo(f"Added {habit.name} ({habit.id})")


@cli.command()
@click.argument("habit_id")
@click.argument("name")
@click.pass_obj
def rename(app: AppContext, habit_id: str, name: str) -> None:
    """Rename a habit."""

    _require_habit(app, habit_id)
    if not app.registry.rename(habit_id, name):
        raise click.ClickException("Habit name must not be blank")
    click.echo(f"Renamed {habit_id} to {name}")


@cli.command()
@click.argument("habit_id")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_obj
def delete(app: AppContext, habit_id: str, yes: bool) -> None:
    """Delete a habit and all of its tracking data."""

    habit = _require_habit(app, habit_id)
    if not yes:
        click.confirm(
            f"Delete {habit.name}? All tracking data will be lost.", abort=True
        )
    app.registry.delete(habit_id)
    click.echo(f"Deleted {habit.name}")


@cli.command()
@click.argument("habit_id")
@click.option("--date", "day", callback=_parse_day, help="Day to toggle (YYYY-MM-DD); defaults to today.")
@click.pass_obj
def toggle(app: AppContext, habit_id: str, day: date | None) -> None:
    """Cycle a day through done, partial and unset."""

    habit = _require_habit(app, habit_id)
    day = day or app.clock.today()
    state = app.registry.toggle_completion(habit_id, day)
    if state is None:
        raise click.ClickException("Cannot record completion for a future date")
    click.echo(
        f"{habit.name} {day.isoformat()}: {state.value}  streak {habit.streak} (best {habit.best_streak})"
    )


@cli.command()
@click.pass_obj
def stats(app: AppContext) -> None:
    """Show weekly rate and lifetime totals per habit."""

    today = app.clock.today()
    for habit in app.registry:
        summary = summarize(habit, today)
        click.echo(
            f"{summary.name}: week {format_rate(summary.weekly_rate)}, "
            f"completed {summary.completed}, partial {summary.partial}, "
            f"streak {summary.streak}, best {summary.best_streak}, "
            f"longest run {summary.longest_run}"
        )


@cli.command()
@click.argument("output", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def export(app: AppContext, output: Path | None) -> None:
    """Export every recorded entry to CSV."""

    path = export_habits_csv(habits=app.registry.habits, output_path=output or app.config.export_path)
    click.echo(f"Export written: {path}")


@cli.command()
@click.argument("habit_id")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--days", default=7, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
def chart(app: AppContext, habit_id: str, output: Path, days: int) -> None:
    """Render the recent-days chart of a habit to PNG."""

    from .charts import habit_chart_png

    habit = _require_habit(app, habit_id)
    path = habit_chart_png(habit, app.clock.today(), output, window_days=days)
    click.echo(f"Chart written: {path}")


def main() -> None:
    cli()


__all__ = ["cli", "main"]
