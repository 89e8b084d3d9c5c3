"""Load the addon's package.json."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from loguru import logger

MANIFEST_NAME = "package.json"

# What a missing value renders as in generated templates
UNDEFINED = "undefined"


def _as_text(value: Any) -> str:
    """Render a manifest value the way it reads in the generated templates."""
    if isinstance(value, str):
        return value
    # null, true, 42 stay as written in package.json
    return json.dumps(value)


@dataclass(frozen=True)
class ProjectMetadata:
    """Addon name and repository URL; ``None`` means the key was absent."""

    name: Optional[str] = None
    repository_url: Optional[str] = None

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> "ProjectMetadata":
        """Build metadata from a parsed manifest.

        ``repository`` may be a plain URL string or npm's ``{"type": ..., "url": ...}`` form.
        """
        name = _as_text(manifest["name"]) if "name" in manifest else None
        repository_url = None
        if "repository" in manifest:
            repository = manifest["repository"]
            if isinstance(repository, Mapping):
                if "url" in repository:
                    repository_url = _as_text(repository["url"])
            else:
                repository_url = _as_text(repository)
        return cls(name=name, repository_url=repository_url)

    def template_variables(self) -> Dict[str, str]:
        """Variables for application.hbs, with absent values as ``undefined``."""
        return {
            "ADDON_NAME": UNDEFINED if self.name is None else self.name,
            "REPO_URL": UNDEFINED if self.repository_url is None else self.repository_url,
        }


def read_manifest(addon_root: Path) -> Dict[str, Any]:
    """Read ``addon_root/package.json``.

    A missing manifest, or one that is not a JSON object, is not an error: a
    warning is logged and an empty dict returned. Malformed JSON is logged
    and re-raised.
    """
    manifest_path = Path(addon_root) / MANIFEST_NAME
    if not manifest_path.exists():
        logger.warning(f"Could not find parent package.json at {manifest_path}")
        return {}

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse {manifest_path}: {e}")
        raise

    if not isinstance(manifest, dict):
        logger.warning(f"{manifest_path} does not contain a JSON object ({type(manifest).__name__}), ignoring it")
        return {}
    return manifest


def load_project_metadata(addon_root: Path) -> ProjectMetadata:
    """Read the addon manifest and extract its metadata."""
    return ProjectMetadata.from_manifest(read_manifest(addon_root))
