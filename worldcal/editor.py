"""
Authoring side of the calendar.

The editor works on its own draft document. Nothing reaches a running
CalendarModel until ``commit`` validates the draft and swaps a copy in.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .engine import CalendarModel
from .models import MonthDefinition
from .store import document_json, load_calendar, save_calendar
from .validation import ensure_valid, find_issues

logger = logging.getLogger(__name__)

NEW_DAY_PART = "New Part"
NEW_MONTH = "New Month"
NEW_MONTH_DAYS = 30


class CalendarEditor:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.draft = CalendarModel()
        self._saved_json = ""

    # --- file operations ---

    def load(self):
        """Loads the draft from disk, or starts an empty one when no file exists."""
        if self.path.exists():
            self.draft = load_calendar(self.path)
            self._saved_json = document_json(self.draft)
        else:
            self.draft = CalendarModel()
            self._saved_json = ""

    def save(self):
        ensure_valid(self.draft.config)
        save_calendar(self.draft, self.path)
        self._saved_json = document_json(self.draft)
        logger.info("Calendar data saved to %s", self.path)

    def reset_to_default(self):
        self.draft.reset_to_default()

    @property
    def is_dirty(self) -> bool:
        return document_json(self.draft) != self._saved_json

    def issues(self) -> List[str]:
        return find_issues(self.draft.config)

    def commit(self, model: CalendarModel):
        """Validates the draft and replaces the live model's document with a copy of it."""
        ensure_valid(self.draft.config)
        model.replace(self.draft.config.model_copy(deep=True), self.draft.state.model_copy(deep=True))

    # --- day parts ---

    def add_day_part(self, name: str = NEW_DAY_PART) -> int:
        self.draft.config.day_parts.append(name)
        return len(self.draft.config.day_parts) - 1

    def rename_day_part(self, index: int, name: str):
        self.draft.config.day_parts[index] = name

    def remove_day_part(self, index: int) -> str:
        return self.draft.config.day_parts.pop(index)

    def move_day_part(self, old_index: int, new_index: int):
        _move(self.draft.config.day_parts, old_index, new_index)

    # --- weekdays ---

    def add_week_day(self, name: str) -> int:
        self.draft.config.week_days.append(name)
        return len(self.draft.config.week_days) - 1

    def remove_week_day(self, index: int) -> str:
        return self.draft.config.week_days.pop(index)

    # --- months ---

    def add_month(self, name: str = NEW_MONTH, days: int = NEW_MONTH_DAYS) -> int:
        self.draft.config.months.append(MonthDefinition(name=name, days_in_month=days))
        return len(self.draft.config.months) - 1

    def update_month(self, index: int, name: Optional[str] = None, days: Optional[int] = None):
        month = self.draft.config.months[index]
        if name is not None:
            month.name = name
        if days is not None:
            month.days_in_month = days

    def remove_month(self, index: int) -> MonthDefinition:
        return self.draft.config.months.pop(index)

    def move_month(self, old_index: int, new_index: int):
        _move(self.draft.config.months, old_index, new_index)

    def needs_confirmation(self, kind: str, index: int) -> bool:
        # Untouched placeholder entries can go without asking
        if kind == "day_part":
            return self.draft.config.day_parts[index] != NEW_DAY_PART
        if kind == "month":
            return self.draft.config.months[index].name != NEW_MONTH
        raise ValueError(f"Unknown entry kind '{kind}'. Expected 'day_part' or 'month'")


def _move(items: list, old_index: int, new_index: int):
    items.insert(new_index, items.pop(old_index))
