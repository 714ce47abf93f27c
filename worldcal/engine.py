"""
Calendar arithmetic for configurable calendars.

A calendar is a cycle of named day parts, an optional cycle of weekday
names and an ordered list of months. Skipping time moves the day-part
index and carries (or borrows) whole days into the day, month and year
fields. Years never drop below 1.
"""

import logging
from typing import Optional, Tuple

from .models import CalendarConfig, CalendarState, MonthDefinition

logger = logging.getLogger(__name__)

NO_DATA = "No Data"

DEFAULT_DAY_PARTS = ["Morning", "Noon", "Afternoon", "Evening"]

DEFAULT_MONTHS = [
    ("January", 31),
    ("February", 28),
    ("March", 31),
    ("April", 30),
    ("May", 31),
    ("June", 30),
    ("July", 31),
    ("August", 31),
    ("September", 30),
    ("October", 31),
    ("November", 30),
    ("December", 31),
]

DEFAULT_YEAR = 2025


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class CalendarModel:
    def __init__(self, config: Optional[CalendarConfig] = None, state: Optional[CalendarState] = None):
        self.config = config if config is not None else CalendarConfig()
        self.state = state if state is not None else CalendarState()

    @classmethod
    def default(cls) -> "CalendarModel":
        model = cls()
        model.reset_to_default()
        return model

    def reset_to_default(self):
        """Replace the document with the Gregorian-like default calendar."""
        self.config = CalendarConfig(
            day_parts=list(DEFAULT_DAY_PARTS),
            months=[MonthDefinition(name=name, days_in_month=days) for name, days in DEFAULT_MONTHS],
        )
        self.state = CalendarState(year=DEFAULT_YEAR)
        logger.info("Calendar reset to Gregorian defaults")

    def replace(self, config: CalendarConfig, state: CalendarState):
        self.config = config
        self.state = state

    def snapshot(self) -> Tuple[int, int, int, int, int]:
        s = self.state
        return (s.year, s.month_index, s.day, s.day_part_index, s.week_day_index)

    # --- time management ---

    def skip_time_part(self, amount: int):
        """
        Move the current day part by ``amount`` (negative goes backwards).

        Every full day-part cycle crossed advances or regresses one day.
        Does nothing when the calendar has no day parts.
        """
        parts = len(self.config.day_parts)
        if parts == 0 or amount == 0:
            return

        # settle indices left stale by shrunk lists, the same way reads clamp them
        self.state.day_part_index = clamp(self.state.day_part_index, 0, parts - 1)
        if self.config.week_days:
            self.state.week_day_index = clamp(self.state.week_day_index, 0, len(self.config.week_days) - 1)

        months = self.config.months
        if months:
            self.state.month_index = clamp(self.state.month_index, 0, len(months) - 1)
            self.state.day = clamp(self.state.day, 1, months[self.state.month_index].days_in_month)

        self.state.day_part_index += amount

        while self.state.day_part_index >= parts:
            self.state.day_part_index -= parts
            self._advance_day()

        while self.state.day_part_index < 0:
            self.state.day_part_index += parts
            self._regress_day()

        logger.debug("Skipped %d day parts, now %s", amount, self.get_formatted_date())

    def _advance_day(self):
        if not self.config.months:
            return

        s = self.state
        s.day += 1

        weekdays = len(self.config.week_days)
        if weekdays > 0:
            s.week_day_index = (s.week_day_index + 1) % weekdays

        if s.day > self.config.months[s.month_index].days_in_month:
            s.day = 1
            self._advance_month()

    def _advance_month(self):
        s = self.state
        s.month_index += 1
        if s.month_index >= len(self.config.months):
            s.month_index = 0
            s.year += 1

    def _regress_day(self):
        if not self.config.months:
            return

        s = self.state
        s.day -= 1

        weekdays = len(self.config.week_days)
        if weekdays > 0:
            s.week_day_index = (s.week_day_index - 1 + weekdays) % weekdays

        if s.day < 1:
            self._regress_month()
            # day count of the month we just moved into
            s.day = self.config.months[s.month_index].days_in_month

    def _regress_month(self):
        s = self.state
        s.month_index -= 1
        if s.month_index < 0:
            s.month_index = len(self.config.months) - 1
            s.year -= 1
            if s.year < 1:
                logger.debug("Year underflow, holding at year 1")
                s.year = 1

    # --- queries ---

    def current_month(self) -> Optional[MonthDefinition]:
        if not self.config.months:
            return None
        return self.config.months[clamp(self.state.month_index, 0, len(self.config.months) - 1)]

    def current_day_part(self) -> Optional[str]:
        if not self.config.day_parts:
            return None
        return self.config.day_parts[clamp(self.state.day_part_index, 0, len(self.config.day_parts) - 1)]

    def current_week_day(self) -> Optional[str]:
        if not self.config.week_days:
            return None
        return self.config.week_days[clamp(self.state.week_day_index, 0, len(self.config.week_days) - 1)]

    def get_formatted_date(self) -> str:
        month = self.current_month()
        day_part = self.current_day_part()
        if month is None or day_part is None:
            return NO_DATA

        pieces = [str(self.state.day), month.name, str(self.state.year)]
        week_day = self.current_week_day()
        if week_day is not None:
            pieces.append(week_day)
        return f"{' '.join(pieces)} - {day_part}"
