"""
Tool registry: names, argument models and handlers for every operation.

A tool call always returns a result envelope
    {"content": [{"type": "text", "text": ...}], "isError": bool}
Errors never escape call_tool; they come back as isError results.
"""
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from core.errors import I18nToolError, ValidationError
from core.mutation import TranslationUpdate
from core.query import UnitFilter
from core.services.translation_service import TranslationService
from core.logger import get_logger

logger = get_logger(__name__)


class NoArguments(BaseModel):
    pass


class ListArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    locale: str = Field(..., description="Target locale (e.g., 'de')")
    page: int = Field(0, ge=0, description="Zero-based page index")
    page_size: Optional[int] = Field(None, ge=1, alias="pageSize", description="Units per page (default 50)")


class UpdateArguments(BaseModel):
    id: str = Field(..., description="The unit ID")
    locale: str = Field(..., description="Target locale")
    translation: str = Field(..., description="The translated text, inline XLIFF markup allowed")


class UpdateItem(BaseModel):
    id: str
    translation: str


class BulkUpdateArguments(BaseModel):
    locale: str = Field(..., description="Target locale")
    updates: List[UpdateItem] = Field(..., description="Up to 50 {id, translation} pairs")


@dataclass
class Tool:
    name: str
    description: str
    arguments: Type[BaseModel]
    handler: Callable[[TranslationService, Any], Any]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.arguments.model_json_schema(by_alias=True),
        }


def _list(unit_filter: UnitFilter):
    def handler(service: TranslationService, args: ListArguments):
        return service.list_translations(args.locale, unit_filter, args.page, args.page_size).to_dict()
    return handler


def _bulk_update(service: TranslationService, args: BulkUpdateArguments):
    updates = [TranslationUpdate(id=u.id, translation=u.translation) for u in args.updates]
    return service.bulk_update_translations(args.locale, updates).to_dict()


TOOLS: Dict[str, Tool] = {t.name: t for t in [
    Tool(
        "extract_i18n",
        "Extract i18n strings and merge into target files using Angular CLI",
        NoArguments,
        lambda service, args: service.extract_i18n(),
    ),
    Tool(
        "list_new_translations",
        "List new (untranslated) units with state='initial'",
        ListArguments,
        _list(UnitFilter.NEW),
    ),
    Tool(
        "list_all_translations",
        "List all units in the translation file",
        ListArguments,
        _list(UnitFilter.ALL),
    ),
    Tool(
        "update_translation",
        "Update the translation for a specific unit",
        UpdateArguments,
        lambda service, args: service.update_translation(args.id, args.locale, args.translation),
    ),
    Tool(
        "bulk_update_translations",
        "Update several units of one locale in a single call (max 50)",
        BulkUpdateArguments,
        _bulk_update,
    ),
    Tool(
        "get_i18n_settings",
        "Read sourceLocale and locales from angular.json",
        NoArguments,
        lambda service, args: service.get_i18n_settings(),
    ),
]}


def list_tools() -> List[Dict[str, Any]]:
    return [tool.describe() for tool in TOOLS.values()]


def text_result(text: str, is_error: bool = False) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


def parse_arguments(tool: Tool, arguments: Optional[Dict[str, Any]]) -> BaseModel:
    try:
        return tool.arguments.model_validate(arguments or {})
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid arguments for {tool.name}: {e}") from e


def call_tool(service: TranslationService, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    tool = TOOLS.get(name)
    if tool is None:
        return text_result(f"Unknown tool: {name}", is_error=True)

    logger.info(f"Tool call: {name}")
    try:
        result = tool.handler(service, parse_arguments(tool, arguments))
    except I18nToolError as e:
        logger.warning(f"{name} failed: {e}")
        return text_result(str(e), is_error=True)
    except Exception as e:
        logger.exception(f"Unexpected error in {name}")
        return text_result(str(e), is_error=True)

    if isinstance(result, str):
        return text_result(result)
    return text_result(json.dumps(result, indent=2, ensure_ascii=False))
