"""
Error taxonomy for the translation tools.

Every failure a tool can report derives from I18nToolError so the tool
layer can turn it into an error result with a readable message.
"""


class I18nToolError(Exception):
    """Base class for all errors surfaced to a tool caller."""


class NotFoundError(I18nToolError):
    """A translation file, project descriptor or unit id does not exist."""


class ParseError(I18nToolError):
    """Malformed XML or JSON input, including a malformed translation fragment."""


class ValidationError(I18nToolError):
    """Tool arguments are malformed or exceed a limit."""


class ConfigError(I18nToolError):
    """The project descriptor lacks required structure."""


class ExternalToolError(I18nToolError):
    """The extraction toolchain exited with an error."""
