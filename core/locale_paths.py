from pathlib import Path
from typing import Optional, Union

BASE_FILE_NAME = "messages"
XLF_SUFFIX = ".xlf"


def resolve_xlf_path(locale_dir: Union[str, Path], locale: Optional[str] = None) -> Path:
    """
    Maps a locale to its translation file inside locale_dir.

    No locale -> messages.xlf (the extracted source file)
    'de'      -> messages.de.xlf
    """
    if not locale:
        return Path(locale_dir) / f"{BASE_FILE_NAME}{XLF_SUFFIX}"
    return Path(locale_dir) / f"{BASE_FILE_NAME}.{locale}{XLF_SUFFIX}"
