from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .engine import NO_DATA, CalendarModel, clamp

TEMPLATE_DIR = Path(__file__).parent / "templates"


class TextRenderer:
    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(),
        )

    def render(self, template_name: str, context: dict) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_status(self, model: CalendarModel) -> str:
        """Short two-line status: numeric date (1-based month) and the day part."""
        config, state = model.config, model.state
        if not config.day_parts or not config.months:
            return NO_DATA

        return self.render("status.txt", {
            "day": state.day,
            "month_number": clamp(state.month_index, 0, len(config.months) - 1) + 1,
            "year": state.year,
            "week_day": model.current_week_day(),
            "day_part": model.current_day_part(),
        })

    def render_skip_log(self, amount: int, before: str, after: str) -> str:
        return self.render("skip_log.txt", {
            "amount": abs(amount),
            "direction": "Forward" if amount >= 0 else "Backward",
            "before": before,
            "after": after,
        })
