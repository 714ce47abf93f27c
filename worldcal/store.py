import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .engine import CalendarModel
from .models import CalendarConfig, CalendarState, Settings

logger = logging.getLogger(__name__)

CONFIG_DIR = Path("config")

YAML_SUFFIXES = (".yaml", ".yml")


class CalendarLoadError(ValueError):
    """Raised when a calendar document exists but cannot be read."""


def load_settings(path: Path = CONFIG_DIR / "settings.yaml") -> Settings:
    """Loads runtime settings from YAML file."""
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Settings(**(data or {}))


def parse_document(data: Any) -> CalendarModel:
    if not isinstance(data, dict):
        raise CalendarLoadError(f"Calendar document must be an object, got {type(data).__name__}")
    try:
        config = CalendarConfig.model_validate(data)
        state = CalendarState.model_validate(data)
    except ValidationError as e:
        raise CalendarLoadError(f"Invalid calendar document: {e}") from e
    return CalendarModel(config, state)


def load_calendar(path: Union[str, Path]) -> CalendarModel:
    """Loads a calendar document (JSON, or YAML by suffix)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Calendar file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise CalendarLoadError(f"Could not parse {path}: {e}") from e

    return parse_document(data)


def dump_document(model: CalendarModel) -> Dict[str, Any]:
    doc = model.config.model_dump(by_alias=True)
    doc.update(model.state.model_dump(by_alias=True))
    return doc


def document_json(model: CalendarModel) -> str:
    return json.dumps(dump_document(model), indent=4, ensure_ascii=False)


def save_calendar(model: CalendarModel, path: Union[str, Path]):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            yaml.safe_dump(dump_document(model), f, sort_keys=False, allow_unicode=True)
        else:
            f.write(document_json(model))

    logger.info("Calendar saved to %s", path)


class ConfigStore:
    """Where the running calendar is read from and written to.

    Progress goes to the save file; the authored config file is only the
    starting point when no save exists yet.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def load(self) -> CalendarModel:
        save_path = self.settings.save_path
        config_path = self.settings.config_path

        if save_path.exists():
            model = load_calendar(save_path)
            logger.info("Loaded calendar from save file %s", save_path)
            return model

        if config_path.exists():
            model = load_calendar(config_path)
            logger.info("No save found, loaded config %s", config_path)
            return model

        logger.warning("No save or config file found, starting with an empty calendar")
        return CalendarModel()

    def persist(self, model: CalendarModel):
        save_calendar(model, self.settings.save_path)
