"""Environment configuration for docsetup.

This is the only module that reads ``os.environ``; everything downstream
receives plain values.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from docsetup.scaffold.paths import Layout

# npm exports the directory the install/script was started from as INIT_CWD
ANCHOR_ENV_VAR = "INIT_CWD"
LAYOUT_ENV_VAR = "DOCSETUP_LAYOUT"


def get_anchor_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get the test-app anchor directory from the environment or the current directory."""
    environ = os.environ if environ is None else environ
    anchor = environ.get(ANCHOR_ENV_VAR)
    if anchor:
        return Path(anchor)
    return Path.cwd()


def get_default_layout(environ: Optional[Mapping[str, str]] = None) -> Layout:
    """Get the layout policy from the environment, defaulting to the split addon/test-app layout."""
    environ = os.environ if environ is None else environ
    value = environ.get(LAYOUT_ENV_VAR, "").strip().lower()
    if not value:
        return Layout.SPLIT
    try:
        return Layout(value)
    except ValueError:
        choices = ", ".join(layout.value for layout in Layout)
        raise ValueError(f"Invalid {LAYOUT_ENV_VAR}={value!r}; expected one of: {choices}") from None
