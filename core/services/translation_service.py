from typing import Any, Dict, List, Optional

from core.config.app_config import AppConfig
from core.extraction import EXTRACTION_DONE_MESSAGE, AngularCliRunner, ExtractionRunner
from core.locale_paths import resolve_xlf_path
from core.mutation import BatchResult, TranslationUpdate, update_batch, update_one
from core.parser import XliffParser
from core.query import QueryPage, UnitFilter, query_units
from core.settings_reader import read_extract_format, read_i18n_settings
from core.logger import get_logger

logger = get_logger(__name__)


class TranslationService:
    """
    One method per tool operation.
    Every call re-reads the translation file; nothing is cached between calls.
    """
    def __init__(self, config: Optional[AppConfig] = None, runner: Optional[ExtractionRunner] = None):
        self.config = config or AppConfig.from_env()
        self.runner = runner or AngularCliRunner(self.config.working_dir)

    def xlf_path(self, locale: Optional[str] = None):
        return resolve_xlf_path(self.config.resolved_locale_dir, locale)

    def extract_i18n(self) -> str:
        fmt = read_extract_format(self.config.working_dir, self.config.default_extract_format)
        self.runner.run(str(self.config.locale_dir), fmt)
        return EXTRACTION_DONE_MESSAGE

    def list_translations(
        self,
        locale: Optional[str],
        unit_filter: UnitFilter = UnitFilter.ALL,
        page: int = 0,
        page_size: Optional[int] = None,
    ) -> QueryPage:
        if page_size is None:
            page_size = self.config.default_page_size

        parser = XliffParser(self.xlf_path(locale))
        parser.load()
        result = query_units(parser.get_translation_units(), unit_filter, page, page_size)
        logger.debug(f"{unit_filter.value} units for {locale!r}: page {page}, {result.total_count} total")
        return result

    def update_translation(self, unit_id: str, locale: Optional[str], translation: str) -> str:
        return update_one(self.xlf_path(locale), unit_id, translation)

    def bulk_update_translations(self, locale: Optional[str], updates: List[TranslationUpdate]) -> BatchResult:
        return update_batch(self.xlf_path(locale), updates, self.config.max_bulk_updates)

    def get_i18n_settings(self) -> Dict[str, Any]:
        return read_i18n_settings(self.config.working_dir)
