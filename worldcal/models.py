from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class MonthDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field("", alias="monthName")
    days_in_month: int = Field(30, alias="daysInMonth", ge=1)


class CalendarConfig(BaseModel):
    """Structure of one calendar year and its day cycle."""

    model_config = ConfigDict(populate_by_name=True)

    day_parts: List[str] = Field(default_factory=list, alias="dayParts")
    week_days: List[str] = Field(default_factory=list, alias="weekDays")
    months: List[MonthDefinition] = Field(default_factory=list)


class CalendarState(BaseModel):
    """Current position in the calendar.

    Indices are not bounded above here; a shrunk sequence may leave them
    stale and readers clamp them.
    """

    model_config = ConfigDict(populate_by_name=True)

    year: int = Field(1, alias="currentYear", ge=1)
    month_index: int = Field(0, alias="currentMonthIndex", ge=0)
    day: int = Field(1, alias="currentDay", ge=1)
    day_part_index: int = Field(0, alias="currentDayPartIndex", ge=0)
    week_day_index: int = Field(0, alias="currentWeekDayIndex", ge=0)


class Settings(BaseModel):
    config_path: Path = Path("config/calendar_config.json")
    save_path: Path = Path("saves/calendar_save.json")
    skip_amount: int = Field(1, ge=0)
    show_debug_logs: bool = True
    persist_on_skip: bool = True
