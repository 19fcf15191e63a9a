from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from lxml import etree

STATE_ATTR = "state"
STATE_INITIAL = "initial"
STATE_TRANSLATED = "translated"


def local_name(node) -> str:
    """Tag name without namespace; empty for comments and processing instructions."""
    if not isinstance(node.tag, str):
        return ""
    return etree.QName(node).localname


def find_child(parent, name: str):
    """First direct child element whose local name is `name`, or None."""
    for child in parent:
        if local_name(child) == name:
            return child
    return None


@dataclass
class TranslationUnit(ABC):
    """
    Represents a single translation unit from an XLIFF file.

    Wraps the live lxml element, so mutations go straight into the
    parsed document. Use from_element() to get the right dialect variant.
    """
    element: etree._Element

    @staticmethod
    def from_element(element: etree._Element) -> "TranslationUnit":
        # Dialect is decided per unit by structure, not by the xliff version attribute
        if find_child(element, "segment") is not None:
            return SegmentedUnit(element)
        return FlatUnit(element)

    @property
    def id(self) -> Optional[str]:
        return self.element.get("id")

    @property
    def segment(self):
        return find_child(self.element, "segment")

    @property
    @abstractmethod
    def container(self):
        """Node holding <source>/<target>: the segment (2.0) or the unit itself (1.2)."""

    @property
    def target(self):
        return find_child(self.container, "target")

    @property
    @abstractmethod
    def state(self) -> Optional[str]:
        """State marker at its dialect-specific location."""

    @abstractmethod
    def is_new(self) -> bool:
        """True when the unit still carries state='initial'."""

    def ensure_target(self):
        """Returns the <target> node, creating it in the container's namespace if absent."""
        target = self.target
        if target is None:
            ns = etree.QName(self.container).namespace
            tag = f"{{{ns}}}target" if ns else "target"
            target = etree.SubElement(self.container, tag)
        return target

    @abstractmethod
    def mark_translated(self):
        """Sets state='translated' where this dialect keeps it."""


class SegmentedUnit(TranslationUnit):
    """XLIFF 2.0 <unit>: state lives on <segment>."""

    @property
    def container(self):
        return self.segment

    @property
    def state(self) -> Optional[str]:
        return self.segment.get(STATE_ATTR)

    def is_new(self) -> bool:
        if self.segment.get(STATE_ATTR) == STATE_INITIAL:
            return True
        target = self.target
        return target is not None and target.get(STATE_ATTR) == STATE_INITIAL

    def mark_translated(self):
        self.segment.set(STATE_ATTR, STATE_TRANSLATED)
        # Older 2.0 files carry the state on <target> as well
        target = self.target
        if target is not None and target.get(STATE_ATTR) is not None:
            target.set(STATE_ATTR, STATE_TRANSLATED)


class FlatUnit(TranslationUnit):
    """XLIFF 1.2 <trans-unit>: <target> is a direct child and carries the state."""

    @property
    def container(self):
        return self.element

    @property
    def state(self) -> Optional[str]:
        target = self.target
        return target.get(STATE_ATTR) if target is not None else None

    def is_new(self) -> bool:
        return self.state == STATE_INITIAL

    def mark_translated(self):
        self.ensure_target().set(STATE_ATTR, STATE_TRANSLATED)
