from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from lxml import etree

from .errors import NotFoundError, ParseError, ValidationError
from .parser import XliffParser
from .xliff_obj import TranslationUnit
from .logger import get_logger

logger = get_logger(__name__)

MAX_BULK_UPDATES = 50


@dataclass
class TranslationUpdate:
    id: str
    translation: str


@dataclass
class BatchResult:
    updated: List[str] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)

    def to_dict(self):
        return {"updated": self.updated, "notFound": self.not_found}


def find_unit(units: Sequence[TranslationUnit], unit_id: str) -> Optional[TranslationUnit]:
    """Exact id match; the first unit wins when ids are duplicated."""
    return next((u for u in units if u.id == unit_id), None)


def parse_fragment(text: str, namespace: Optional[str] = None):
    """
    Parses translated text as mixed content so inline markup survives.
    The wrapper carries the host namespace, so <ph/> etc. land in the
    document's namespace instead of the empty one.
    """
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    try:
        return etree.fromstring(f"<wrapper{xmlns}>{text}</wrapper>")
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Translation is not well-formed markup: {e}") from e


def set_target_content(target, text: str):
    """Replaces all content of <target> with the parsed fragment."""
    wrapper = parse_fragment(text, etree.QName(target).namespace)

    target.text = None
    for child in list(target):
        target.remove(child)

    target.text = wrapper.text
    for child in list(wrapper):
        target.append(child)


def apply_update(units: Sequence[TranslationUnit], unit_id: str, text: str) -> bool:
    """
    Writes `text` into the unit's target and marks it translated.
    In-memory only. Returns False when no unit has this id.
    """
    unit = find_unit(units, unit_id)
    if unit is None:
        return False

    target = unit.ensure_target()
    set_target_content(target, text)
    unit.mark_translated()
    return True


def update_one(file_path, unit_id: str, text: str) -> str:
    parser = XliffParser(file_path)
    parser.load()
    units = parser.get_translation_units()

    if not apply_update(units, unit_id, text):
        logger.info(f"Unit {unit_id!r} not found in {file_path}")
        raise NotFoundError(f'Unit with id "{unit_id}" not found.')

    parser.save()
    logger.info(f"Updated unit {unit_id!r} in {file_path}")
    return f"Updated translation for unit {unit_id}"


def update_batch(file_path, updates: Sequence[TranslationUpdate], max_updates: int = MAX_BULK_UPDATES) -> BatchResult:
    """
    Applies all updates against one parsed document and saves once.
    Unknown ids are collected in not_found; they never abort the batch.
    """
    if not isinstance(updates, (list, tuple)):
        raise ValidationError("updates must be a list.")
    if len(updates) > max_updates:
        raise ValidationError(f"Maximum {max_updates} updates allowed per tool call.")

    parser = XliffParser(file_path)
    parser.load()
    units = parser.get_translation_units()

    result = BatchResult()
    for update in updates:
        if apply_update(units, update.id, update.translation):
            result.updated.append(update.id)
        else:
            result.not_found.append(update.id)

    parser.save()
    logger.info(
        f"Bulk update on {file_path}: {len(result.updated)} updated, {len(result.not_found)} not found"
    )
    return result
