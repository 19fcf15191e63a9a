"""XLIFF documents shared by the tests."""


def xliff2(count=3, state="initial", trg_lang="de"):
    units = ""
    for i in range(1, count + 1):
        units += f"""    <unit id="unit-{i}">
      <segment state="{state}">
        <source>Source {i}</source>
        <target>Target {i}</target>
      </segment>
    </unit>
"""
    return f"""<?xml version="1.0" encoding="UTF-8" ?>
<xliff version="2.0" xmlns="urn:oasis:names:tc:xliff:document:2.0" srcLang="en" trgLang="{trg_lang}">
  <file id="ngi18n" original="ng.template">
{units}  </file>
</xliff>"""


def xliff12(count=3, state="initial", trg_lang="de"):
    units = ""
    for i in range(1, count + 1):
        units += f"""      <trans-unit id="unit-{i}" datatype="html">
        <source>Source {i}</source>
        <target state="{state}">Target {i}</target>
      </trans-unit>
"""
    return f"""<?xml version="1.0" encoding="UTF-8" ?>
<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
  <file source-language="en" target-language="{trg_lang}" datatype="plaintext" original="ng.template">
    <body>
{units}    </body>
  </file>
</xliff>"""


# Older 2.0 output: state on <target>, one unit already translated
XLIFF2_TARGET_STATE = """<?xml version="1.0" encoding="UTF-8" ?>
<xliff version="2.0" xmlns="urn:oasis:names:tc:xliff:document:2.0" srcLang="en" trgLang="de">
  <file id="ngi18n" original="ng.template">
    <unit id="1">
      <segment>
        <source>Hello</source>
        <target state="initial">Hello</target>
      </segment>
    </unit>
    <unit id="2">
      <segment>
        <source>World</source>
        <target state="translated">Welt</target>
      </segment>
    </unit>
  </file>
</xliff>"""

# Both dialects in one file, 1.2 unit first in document order
MIXED_DIALECTS = """<?xml version="1.0" encoding="UTF-8" ?>
<xliff version="2.0">
  <file id="f1">
    <trans-unit id="flat-1">
      <source>Flat</source>
      <target state="initial">Flat</target>
    </trans-unit>
    <unit id="seg-1">
      <segment state="initial">
        <source>Segmented</source>
      </segment>
    </unit>
  </file>
</xliff>"""

ANGULAR_JSON = """{
  "version": 1,
  "projects": {
    "shop": {
      "projectType": "application",
      "i18n": {
        "sourceLocale": "de",
        "locales": {
          "en": {"translation": "src/locale/messages.en.xlf"},
          "fr": "src/locale/messages.fr.xlf"
        }
      },
      "architect": {
        "extract-i18n": {
          "builder": "ng-extract-i18n-merge:ng-extract-i18n-merge",
          "options": {"format": "xlf", "outputPath": "src/locale"}
        }
      }
    },
    "admin": {
      "i18n": {"sourceLocale": "en"}
    }
  }
}"""
