import logging
from pathlib import Path
from typing import Optional

import typer

from worldcal.editor import CalendarEditor
from worldcal.models import Settings
from worldcal.renderer import TextRenderer
from worldcal.store import CONFIG_DIR, ConfigStore, load_calendar, load_settings
from worldcal.validation import find_issues

app = typer.Typer()

DEFAULT_SETTINGS = CONFIG_DIR / "settings.yaml"


@app.callback()
def main(
    ctx: typer.Context,
    settings: Path = typer.Option(DEFAULT_SETTINGS, help="Settings file (YAML)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log calendar activity"),
):
    """
    Calendar debug tool: inspect and skip time on the running calendar.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_settings(settings)
    except FileNotFoundError as e:
        if settings != DEFAULT_SETTINGS:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        ctx.obj = Settings()
    except Exception as e:
        typer.echo(f"Error: invalid settings: {e}", err=True)
        raise typer.Exit(code=1)


def _skip(settings: Settings, amount: int, save: bool):
    try:
        store = ConfigStore(settings)
        model = store.load()
        renderer = TextRenderer()

        before = model.get_formatted_date()
        model.skip_time_part(amount)
        if save and settings.persist_on_skip:
            store.persist(model)

        if settings.show_debug_logs:
            color = typer.colors.GREEN if amount >= 0 else typer.colors.RED
            typer.secho(renderer.render_skip_log(amount, before, model.get_formatted_date()), fg=color)
        typer.echo(renderer.render_status(model))

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def forward(
    ctx: typer.Context,
    amount: Optional[int] = typer.Option(None, min=0, help="Day parts to skip (defaults to skip_amount setting)"),
    save: bool = typer.Option(True, help="Write the new date to the save file"),
):
    """Skip forward by a number of day parts."""
    settings = ctx.obj
    _skip(settings, settings.skip_amount if amount is None else amount, save)


@app.command()
def backward(
    ctx: typer.Context,
    amount: Optional[int] = typer.Option(None, min=0, help="Day parts to rewind (defaults to skip_amount setting)"),
    save: bool = typer.Option(True, help="Write the new date to the save file"),
):
    """Skip backward by a number of day parts."""
    settings = ctx.obj
    _skip(settings, -(settings.skip_amount if amount is None else amount), save)


@app.command()
def show(ctx: typer.Context):
    """Print the current date."""
    try:
        model = ConfigStore(ctx.obj).load()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(model.get_formatted_date())
    typer.echo(TextRenderer().render_status(model))


@app.command()
def reset(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Overwrite the config file with the Gregorian default calendar."""
    settings = ctx.obj
    if not yes:
        typer.confirm(
            f"Reset {settings.config_path} to the Gregorian calendar with 4 day parts? Current settings will be lost.",
            abort=True,
        )

    try:
        editor = CalendarEditor(settings.config_path)
        editor.reset_to_default()
        editor.save()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Calendar reset to defaults in {settings.config_path}")


@app.command()
def verify_config(ctx: typer.Context):
    """Load and validate the calendar config without touching the save file."""
    settings = ctx.obj
    try:
        model = load_calendar(settings.config_path)
    except Exception as e:
        typer.echo(f"❌ Configuration invalid: {e}")
        raise typer.Exit(code=1)

    issues = find_issues(model.config)
    if issues:
        typer.echo("❌ Configuration invalid:")
        for issue in issues:
            typer.echo(f"  - {issue}")
        raise typer.Exit(code=1)

    typer.echo("✅ Configuration valid!")
    typer.echo(f"Found {len(model.config.day_parts)} day parts.")
    typer.echo(f"Found {len(model.config.months)} months.")
    typer.echo(f"Found {len(model.config.week_days)} weekdays.")
    typer.echo(f"Current date: {model.get_formatted_date()}")


if __name__ == "__main__":
    app()
