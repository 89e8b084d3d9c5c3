from docsetup.scaffold.manager import DocsSetupManager, SetupReport, setup_docs
from docsetup.scaffold.metadata import ProjectMetadata, load_project_metadata, read_manifest
from docsetup.scaffold.paths import Layout, ProjectPaths, resolve_project_paths

__all__ = [
    "DocsSetupManager",
    "Layout",
    "ProjectMetadata",
    "ProjectPaths",
    "SetupReport",
    "load_project_metadata",
    "read_manifest",
    "resolve_project_paths",
    "setup_docs",
]
