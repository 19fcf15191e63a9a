import unittest
import os
import shutil
import tempfile

from lxml import etree

from core.parser import XliffParser
from core.xliff_obj import FlatUnit, SegmentedUnit, TranslationUnit
from xliff_samples import MIXED_DIALECTS, XLIFF2_TARGET_STATE, xliff12


class TestUnitIndex(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def load(self, content):
        path = os.path.join(self.test_dir, "messages.xlf")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        parser = XliffParser(path)
        parser.load()
        return parser

    def test_units_listed_before_trans_units(self):
        units = self.load(MIXED_DIALECTS).get_translation_units()

        # <unit> elements come first even though the <trans-unit> precedes them in the file
        self.assertEqual([u.id for u in units], ["seg-1", "flat-1"])
        self.assertIsInstance(units[0], SegmentedUnit)
        self.assertIsInstance(units[1], FlatUnit)

    def test_segmented_state_lives_on_segment(self):
        units = self.load(MIXED_DIALECTS).get_translation_units()
        seg = units[0]
        self.assertEqual(seg.state, "initial")
        self.assertIsNone(seg.target)
        self.assertTrue(seg.is_new())

    def test_flat_state_lives_on_target(self):
        units = self.load(xliff12(2, state="translated")).get_translation_units()
        self.assertEqual([u.state for u in units], ["translated", "translated"])
        self.assertFalse(any(u.is_new() for u in units))
        self.assertIsNone(units[0].segment)

    def test_target_state_counts_as_new_for_segmented_unit(self):
        units = self.load(XLIFF2_TARGET_STATE).get_translation_units()
        self.assertIsNone(units[0].state)
        self.assertEqual([u.is_new() for u in units], [True, False])

    def test_comments_are_skipped(self):
        unit = TranslationUnit.from_element(etree.fromstring(
            "<trans-unit id='c'><!-- note --><source>S</source><target state='initial'>T</target></trans-unit>"
        ))
        self.assertIsInstance(unit, FlatUnit)
        self.assertEqual(unit.target.text, "T")

    def test_ensure_target_uses_document_namespace(self):
        units = self.load(MIXED_DIALECTS.replace('<xliff version="2.0">',
                                                 '<xliff version="2.0" xmlns="urn:test">')).get_translation_units()
        target = units[0].ensure_target()
        self.assertEqual(target.tag, "{urn:test}target")
        self.assertIs(target.getparent(), units[0].segment)
        # second call returns the same node
        self.assertIs(units[0].ensure_target(), target)

    def test_base_class_cannot_be_instantiated(self):
        element = etree.fromstring("<trans-unit id='x'><source>S</source></trans-unit>")
        with self.assertRaises(TypeError):
            TranslationUnit(element)


if __name__ == "__main__":
    unittest.main()
