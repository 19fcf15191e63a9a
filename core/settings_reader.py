"""
Reads localization settings from the Angular workspace descriptor (angular.json).

Only the first project in the descriptor is considered. Workspaces with several
projects get the settings of whichever project is listed first; there is no
way to pick another one by name.
"""
import json
import os
from typing import Any, Dict

from .errors import ConfigError, NotFoundError, ParseError
from .logger import get_logger

logger = get_logger(__name__)

DESCRIPTOR_FILE = "angular.json"
DEFAULT_EXTRACT_FORMAT = "xlf2"


def load_descriptor(working_dir) -> Dict[str, Any]:
    path = os.path.join(str(working_dir), DESCRIPTOR_FILE)
    if not os.path.exists(path):
        raise NotFoundError(f"File not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e


def first_project(descriptor: Dict[str, Any]) -> Dict[str, Any]:
    projects = descriptor.get("projects") if isinstance(descriptor, dict) else None
    if not isinstance(projects, dict) or not projects:
        raise ConfigError(f"No projects defined in {DESCRIPTOR_FILE}.")
    name = next(iter(projects))
    logger.debug(f"Using project {name!r} from {DESCRIPTOR_FILE}")
    project = projects[name] or {}
    if not isinstance(project, dict):
        raise ConfigError(f"Project {name!r} in {DESCRIPTOR_FILE} is not an object.")
    return project


def read_i18n_settings(working_dir) -> Dict[str, Any]:
    """Returns the first project's i18n block ({sourceLocale, locales}) or {}."""
    project = first_project(load_descriptor(working_dir))
    return project.get("i18n") or {}


def read_extract_format(working_dir, default: str = DEFAULT_EXTRACT_FORMAT) -> str:
    """
    Output format configured for the extract-i18n target.
    Falls back to `default` when the descriptor cannot be read or has no format.
    """
    try:
        project = first_project(load_descriptor(working_dir))
        fmt = project["architect"]["extract-i18n"]["options"]["format"]
    except (OSError, NotFoundError, ParseError, ConfigError, KeyError, TypeError) as e:
        logger.warning(f"Could not read extract-i18n format, using {default!r}: {e}")
        return default
    return fmt or default
