import unittest
import json
import os
import shutil
import tempfile

from core.errors import ConfigError, NotFoundError, ParseError
from core.settings_reader import read_extract_format, read_i18n_settings
from xliff_samples import ANGULAR_JSON


class TestSettingsReader(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def write(self, content):
        if not isinstance(content, str):
            content = json.dumps(content)
        with open(os.path.join(self.test_dir, "angular.json"), "w", encoding="utf-8") as f:
            f.write(content)

    def test_reads_first_project_i18n(self):
        self.write(ANGULAR_JSON)
        settings = read_i18n_settings(self.test_dir)
        self.assertEqual(settings["sourceLocale"], "de")
        self.assertIn("en", settings["locales"])
        self.assertIn("fr", settings["locales"])

    def test_project_without_i18n_gives_empty_mapping(self):
        self.write({"projects": {"app": {"projectType": "application"}}})
        self.assertEqual(read_i18n_settings(self.test_dir), {})

    def test_missing_descriptor(self):
        with self.assertRaises(NotFoundError):
            read_i18n_settings(self.test_dir)

    def test_malformed_descriptor(self):
        self.write("{ not json")
        with self.assertRaises(ParseError):
            read_i18n_settings(self.test_dir)

    def test_descriptor_not_utf8(self):
        with open(os.path.join(self.test_dir, "angular.json"), "wb") as f:
            f.write(b'{"projects": {"a\xff": {}}}')
        with self.assertRaises(ParseError):
            read_i18n_settings(self.test_dir)
        self.assertEqual(read_extract_format(self.test_dir), "xlf2")

    def test_no_projects(self):
        for descriptor in ({"projects": {}}, {"version": 1}):
            with self.subTest(descriptor=descriptor):
                self.write(descriptor)
                with self.assertRaises(ConfigError):
                    read_i18n_settings(self.test_dir)

    def test_extract_format_from_descriptor(self):
        self.write(ANGULAR_JSON)
        self.assertEqual(read_extract_format(self.test_dir), "xlf")

    def test_extract_format_falls_back(self):
        # missing file
        self.assertEqual(read_extract_format(self.test_dir), "xlf2")

        self.write("{ not json")
        self.assertEqual(read_extract_format(self.test_dir), "xlf2")

        self.write({"projects": {"app": {"architect": {"build": {}}}}})
        self.assertEqual(read_extract_format(self.test_dir, default="json"), "json")


if __name__ == "__main__":
    unittest.main()
