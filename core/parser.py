from lxml import etree
from typing import List
import os

from .errors import NotFoundError, ParseError
from .xliff_obj import TranslationUnit
from .logger import get_logger

logger = get_logger(__name__)

# XLIFF 2.0 <unit> first, then XLIFF 1.2 <trans-unit>
UNIT_TAGS = ("unit", "trans-unit")


class XliffParser:
    def __init__(self, file_path: str):
        self.file_path = str(file_path)
        self.tree = None
        self.root = None

    def load(self):
        """Parses the XLIFF file (either 1.2 or 2.0)."""
        if not os.path.exists(self.file_path):
            raise NotFoundError(f"File not found: {self.file_path}")

        parser = etree.XMLParser(remove_blank_text=False)
        try:
            self.tree = etree.parse(self.file_path, parser)
        except etree.XMLSyntaxError as e:
            raise ParseError(f"Invalid XML in {self.file_path}: {e}") from e
        self.root = self.tree.getroot()
        logger.debug(f"Loaded {self.file_path} (version={self.root.get('version')})")

    def save(self):
        """Serializes the tree and overwrites the file it was loaded from."""
        self.tree.write(self.file_path, encoding="utf-8", xml_declaration=True)
        logger.debug(f"Saved {self.file_path}")

    def get_translation_units(self) -> List[TranslationUnit]:
        """
        Collects translation units of both dialects.

        The result is all <unit> elements followed by all <trans-unit>
        elements, so it only matches document order when a file uses a
        single dialect.
        """
        units = []
        for tag in UNIT_TAGS:
            for element in self.root.xpath(f'//*[local-name()="{tag}"]'):
                units.append(TranslationUnit.from_element(element))
        return units

    @staticmethod
    def node_to_string(node) -> str:
        """Serializes a node's subtree as a standalone XML fragment."""
        if node is None:
            return ""
        return etree.tostring(node, encoding="unicode", with_tail=False)
