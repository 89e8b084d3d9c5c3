"""Write the ember-cli-addon-docs files into an addon's test app."""

import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from docsetup.scaffold.metadata import ProjectMetadata, load_project_metadata
from docsetup.scaffold.paths import Layout, ProjectPaths, resolve_project_paths

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


@dataclass
class SetupReport:
    """Targets written (or previewed, in dry-run) and targets skipped."""

    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


class DocsSetupManager:
    """Emits the docs router, templates and index page for one test app."""

    def __init__(self, paths: ProjectPaths, dry_run: bool = False, console: Optional[Console] = None):
        self.paths = paths
        self.dry_run = dry_run
        self.package_root = Path(__file__).parent.parent
        self.templates_dir = self.package_root / "templates"
        self.console = console or Console()
        self.report = SetupReport()

        self.router_file = paths.app_dir / "router.js"
        self.application_file = paths.templates_dir / "application.hbs"
        self.docs_index_file = paths.templates_dir / "docs" / "index.md"
        self.index_layout_file = paths.templates_dir / "index.hbs"
        self.docs_layout_file = paths.templates_dir / "docs.hbs"
        self.readme_file = paths.addon_root / "README.md"

    def render_template(self, template_name: str, variables: Optional[Dict[str, str]] = None) -> str:
        """Render a packaged template, replacing ``{{KEY}}`` tokens with the given variables."""
        content = (self.templates_dir / template_name).read_text(encoding="utf-8").strip()
        variables = variables or {}
        # One pass, so substituted values are never scanned for tokens again
        return PLACEHOLDER_PATTERN.sub(lambda m: str(variables.get(m.group(1), m.group(0))), content)

    def _write(self, target: Path, content: str) -> None:
        if self.dry_run:
            self.console.print(f"[cyan]📝 Would write {escape(str(target))}[/cyan]")
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8", newline="")
            logger.debug(f"Wrote {len(content)} characters to {target}")
        self.report.written.append(target)

    def _skip(self, target: Path, message: str) -> None:
        logger.warning(message)
        self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")
        self.report.skipped.append(target)

    def update_router(self) -> bool:
        """Replace app/router.js with the docs router. Skipped when the app has no router."""
        if not self.router_file.exists():
            self._skip(self.router_file, "router.js not found, skipping router setup.")
            return False

        self._write(self.router_file, self.render_template("router.js"))
        self.console.print("[green]✅ Updated router.js[/green]")
        return True

    def update_application_template(self, metadata: ProjectMetadata) -> bool:
        """Write application.hbs with the addon name and repository URL filled in."""
        content = self.render_template("application.hbs", metadata.template_variables())
        self._write(self.application_file, content)
        self.console.print("[green]✅ Updated application.hbs[/green]")
        return True

    def create_docs_index(self) -> bool:
        """Copy the addon README to docs/index.md, or write a placeholder if there is none."""
        if not self.readme_file.exists():
            message = "README.md not found, creating a placeholder index.md."
            logger.warning(message)
            self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")
            self._write(self.docs_index_file, self.render_template("docs-index-placeholder.md"))
            return True

        if self.dry_run:
            self.console.print(f"[cyan]📝 Would copy {escape(str(self.readme_file))} -> {escape(str(self.docs_index_file))}[/cyan]")
        else:
            self.docs_index_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.readme_file, self.docs_index_file)
        self.report.written.append(self.docs_index_file)
        self.console.print("[green]✅ Created docs/index.md from README.md[/green]")
        return True

    def create_index_layout(self) -> bool:
        """Write the index.hbs landing page."""
        self._write(self.index_layout_file, self.render_template("index.hbs"))
        self.console.print("[green]✅ Created index.hbs[/green]")
        return True

    def create_docs_layout(self) -> bool:
        """Write the docs.hbs viewer layout."""
        self._write(self.docs_layout_file, self.render_template("docs.hbs"))
        self.console.print("[green]✅ Created docs.hbs[/green]")
        return True


def setup_docs(
    base_dir: Path,
    layout: Layout = Layout.SPLIT,
    dry_run: bool = False,
    console: Optional[Console] = None,
) -> SetupReport:
    """Set up ember-cli-addon-docs for the test app at ``base_dir``.

    The manifest is read before anything is written, so a malformed
    package.json aborts the run with nothing on disk changed.
    """
    console = console or Console()
    paths = resolve_project_paths(base_dir, layout)
    logger.info(f"Resolved addon root {paths.addon_root}, test-app root {paths.consumer_root} ({layout.value} layout)")
    console.print(f"addon root ------> {escape(str(paths.addon_root))}")
    console.print(f"test-app root ------> {escape(str(paths.consumer_root))}")

    metadata = load_project_metadata(paths.addon_root)
    addon_name = metadata.template_variables()["ADDON_NAME"]
    console.print(f"[bold]🚀 Setting up ember-cli-addon-docs for {escape(addon_name)}...[/bold]\n")
    if dry_run:
        console.print("[cyan][DRY RUN MODE - No files will be written][/cyan]")

    manager = DocsSetupManager(paths, dry_run=dry_run, console=console)
    manager.update_router()
    manager.update_application_template(metadata)
    manager.create_docs_index()
    manager.create_index_layout()
    manager.create_docs_layout()

    console.print("\n[bold green]🎉 ember-cli-addon-docs setup completed successfully![/bold green]")
    return manager.report
