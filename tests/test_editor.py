import json

import pytest

from worldcal.editor import NEW_DAY_PART, NEW_MONTH, CalendarEditor
from worldcal.engine import CalendarModel
from worldcal.models import CalendarConfig, MonthDefinition
from worldcal.store import load_calendar
from worldcal.validation import CalendarValidationError, find_issues


def test_default_calendar_has_no_issues():
    assert find_issues(CalendarModel.default().config) == []


def test_blank_names_and_empty_months_are_reported():
    config = CalendarConfig(
        day_parts=["Morning", "   "],
        week_days=[""],
        months=[MonthDefinition(name="\t", days_in_month=5), MonthDefinition(name="Rain", days_in_month=3)],
    )
    config.months[1].days_in_month = 0

    issues = find_issues(config)
    assert issues == [
        "Day part #2 has no name",
        "Weekday #1 has no name",
        "Month #1 has no name",
        "Month #2 (Rain) must have at least 1 day",
    ]


def test_new_editor_on_missing_file(tmp_path):
    editor = CalendarEditor(tmp_path / "calendar.json")
    editor.load()
    assert editor.draft.get_formatted_date() == "No Data"
    assert editor.is_dirty


def test_reset_save_and_reload(tmp_path):
    path = tmp_path / "calendar.json"
    editor = CalendarEditor(path)
    editor.reset_to_default()
    editor.save()
    assert not editor.is_dirty
    assert load_calendar(path).snapshot() == (2025, 0, 1, 0, 0)

    other = CalendarEditor(path)
    other.load()
    assert not other.is_dirty
    other.add_day_part()
    assert other.is_dirty


def test_save_refuses_invalid_draft(tmp_path):
    path = tmp_path / "calendar.json"
    editor = CalendarEditor(path)
    editor.reset_to_default()
    editor.rename_day_part(1, "  ")

    with pytest.raises(CalendarValidationError) as excinfo:
        editor.save()
    assert excinfo.value.issues == ["Day part #2 has no name"]
    assert not path.exists()


def test_list_editing(tmp_path):
    editor = CalendarEditor(tmp_path / "calendar.json")
    editor.reset_to_default()

    index = editor.add_month()
    assert editor.draft.config.months[index].name == NEW_MONTH
    assert editor.draft.config.months[index].days_in_month == 30
    editor.update_month(index, name="Undecimber", days=29)
    editor.move_month(index, 0)
    assert [m.name for m in editor.draft.config.months[:2]] == ["Undecimber", "January"]
    assert editor.remove_month(0).days_in_month == 29

    editor.move_day_part(3, 0)
    assert editor.draft.config.day_parts == ["Evening", "Morning", "Noon", "Afternoon"]
    assert editor.remove_day_part(0) == "Evening"

    editor.add_week_day("Firstday")
    editor.add_week_day("Lastday")
    assert editor.remove_week_day(0) == "Firstday"
    assert editor.draft.config.week_days == ["Lastday"]


def test_placeholder_entries_need_no_confirmation(tmp_path):
    editor = CalendarEditor(tmp_path / "calendar.json")
    editor.reset_to_default()
    part = editor.add_day_part()
    month = editor.add_month()

    assert editor.draft.config.day_parts[part] == NEW_DAY_PART
    assert not editor.needs_confirmation("day_part", part)
    assert not editor.needs_confirmation("month", month)
    assert editor.needs_confirmation("day_part", 0)
    assert editor.needs_confirmation("month", 0)

    with pytest.raises(ValueError):
        editor.needs_confirmation("week_day", 0)


def test_commit_swaps_in_a_copy(tmp_path):
    live = CalendarModel.default()
    live.skip_time_part(10)

    editor = CalendarEditor(tmp_path / "calendar.json")
    editor.reset_to_default()
    editor.add_week_day("Moonday")
    editor.commit(live)

    assert live.config.week_days == ["Moonday"]
    assert live.snapshot() == (2025, 0, 1, 0, 0)

    editor.add_week_day("Sunday")
    editor.draft.skip_time_part(1)
    assert live.config.week_days == ["Moonday"]
    assert live.state.day_part_index == 0


def test_commit_leaves_live_model_alone_when_invalid(tmp_path):
    live = CalendarModel.default()
    editor = CalendarEditor(tmp_path / "calendar.json")
    editor.reset_to_default()
    editor.update_month(0, name="")

    with pytest.raises(CalendarValidationError):
        editor.commit(live)
    assert live.config.months[0].name == "January"


def test_saved_file_is_plain_document(tmp_path):
    path = tmp_path / "calendar.json"
    editor = CalendarEditor(path)
    editor.reset_to_default()
    editor.save()
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["dayParts"] == ["Morning", "Noon", "Afternoon", "Evening"]
    assert data["weekDays"] == []
