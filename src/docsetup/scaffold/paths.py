"""Resolve the addon and test-app roots from a single base directory."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


class Layout(str, Enum):
    """How the addon sits relative to the app that hosts its docs."""

    # v2 addon monorepo: <repo>/addon next to <repo>/test-app
    SPLIT = "split"
    # classic addon: one directory holds both package.json and app/
    SINGLE = "single"


@dataclass(frozen=True)
class ProjectPaths:
    addon_root: Path
    consumer_root: Path

    @property
    def app_dir(self) -> Path:
        return self.consumer_root / "app"

    @property
    def templates_dir(self) -> Path:
        return self.app_dir / "templates"


def resolve_project_paths(base_dir: Union[str, Path], layout: Layout = Layout.SPLIT) -> ProjectPaths:
    """Compute the roots for ``base_dir``. Nothing is checked on disk."""
    base = Path(os.path.abspath(base_dir))
    if layout == Layout.SINGLE:
        return ProjectPaths(addon_root=base, consumer_root=base)
    return ProjectPaths(addon_root=base.parent / "addon", consumer_root=base)
