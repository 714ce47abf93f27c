from typing import List

from .models import CalendarConfig


class CalendarValidationError(ValueError):
    def __init__(self, issues: List[str]):
        self.issues = list(issues)
        super().__init__("Calendar has invalid entries: " + "; ".join(self.issues))


def _blank(name) -> bool:
    return name is None or not name.strip()


def find_issues(config: CalendarConfig) -> List[str]:
    """Returns human readable problems that block saving an authored calendar."""
    issues = []

    for i, part in enumerate(config.day_parts):
        if _blank(part):
            issues.append(f"Day part #{i + 1} has no name")

    for i, week_day in enumerate(config.week_days):
        if _blank(week_day):
            issues.append(f"Weekday #{i + 1} has no name")

    for i, month in enumerate(config.months):
        if _blank(month.name):
            issues.append(f"Month #{i + 1} has no name")
        if month.days_in_month < 1:
            issues.append(f"Month #{i + 1} ({month.name.strip() or 'unnamed'}) must have at least 1 day")

    return issues


def ensure_valid(config: CalendarConfig):
    issues = find_issues(config)
    if issues:
        raise CalendarValidationError(issues)
