"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (the selection threshold, the
   export file name, ...) from being scattered throughout the code.
2. Exporters and the surface model read the same values, so the generated
   text and the editing behaviour stay in sync.

Exports:
    SELECTION_THRESHOLD (int): Minimal rubber-band width/height (exclusive).
    EXPORT_BASENAME (str): File name stem used when an export is written.
    EXPORT_EXTENSIONS (dict): Export format value -> file extension.
"""
from typing import Dict

# A rubber-band selection must be strictly larger than this on both axes
SELECTION_THRESHOLD: int = 10

# Markup shell
PAGE_TITLE: str = "My Web Page"
PAGE_BODY_STYLE: str = "body{margin:0;padding:0;position:relative;min-height:100vh;}"

# Typed source
COMPONENT_NAME: str = "MyPage"

# Files
EXPORT_BASENAME: str = "my-page"
EXPORT_EXTENSIONS: Dict[str, str] = {
    "markup": "html",
    "typed-source": "tsx",
    "json": "json",
}
PROJECT_ENCODING: str = "utf-8"
