import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from core.errors import ValidationError

DEFAULT_LOCALE_DIR = "src/locale"
DEFAULT_PAGE_SIZE = 50
DEFAULT_MAX_BULK_UPDATES = 50
DEFAULT_EXTRACT_FORMAT = "xlf2"


@dataclass
class AppConfig:
    """
    Centralized configuration.
    Built once at startup (usually from the environment) and passed explicitly
    to the services, so nothing reads os.environ behind the caller's back.
    """
    working_dir: Path = field(default_factory=Path.cwd)
    locale_dir: Path = Path(DEFAULT_LOCALE_DIR)
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_bulk_updates: int = DEFAULT_MAX_BULK_UPDATES
    default_extract_format: str = DEFAULT_EXTRACT_FORMAT

    def __post_init__(self):
        self.working_dir = Path(self.working_dir)
        self.locale_dir = Path(self.locale_dir)
        if self.default_page_size < 1:
            raise ValidationError(f"default_page_size must be >= 1, got {self.default_page_size}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        LOCALE_DIR        translation file directory (default src/locale)
        I18N_WORKING_DIR  directory holding angular.json (default cwd)
        I18N_PAGE_SIZE    default page size for list tools (default 50)
        """
        env = os.environ if environ is None else environ
        page_size = env.get("I18N_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        try:
            page_size = int(page_size)
        except ValueError:
            raise ValidationError(f"I18N_PAGE_SIZE must be an integer, got {page_size!r}")

        return cls(
            working_dir=Path(env.get("I18N_WORKING_DIR") or Path.cwd()),
            locale_dir=Path(env.get("LOCALE_DIR") or DEFAULT_LOCALE_DIR),
            default_page_size=page_size,
        )

    @property
    def resolved_locale_dir(self) -> Path:
        """locale_dir anchored at working_dir when it is relative."""
        if self.locale_dir.is_absolute():
            return self.locale_dir
        return self.working_dir / self.locale_dir
