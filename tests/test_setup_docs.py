import io
import json

import pytest
from rich.console import Console

from docsetup.scaffold.manager import setup_docs
from docsetup.scaffold.paths import Layout


def _outputs(test_app):
    templates = test_app / "app" / "templates"
    files = [
        test_app / "app" / "router.js",
        templates / "application.hbs",
        templates / "docs" / "index.md",
        templates / "index.hbs",
        templates / "docs.hbs",
    ]
    return {path: path.read_bytes() for path in files if path.exists()}


def test_full_setup(addon_repo):
    test_app = addon_repo / "test-app"

    report = setup_docs(test_app)

    outputs = _outputs(test_app)
    assert len(outputs) == 5
    assert report.skipped == []
    assert set(report.written) == set(outputs)
    application = outputs[test_app / "app" / "templates" / "application.hbs"].decode()
    assert "Foo" in application
    assert "https://x" in application
    assert "{{ADDON_NAME}}" not in application
    assert "{{REPO_URL}}" not in application
    assert outputs[test_app / "app" / "templates" / "docs" / "index.md"] == b"# Foo\n\nAn addon.\n"


def test_setup_is_idempotent(addon_repo):
    test_app = addon_repo / "test-app"

    setup_docs(test_app)
    first = _outputs(test_app)
    setup_docs(test_app)

    assert _outputs(test_app) == first


def test_setup_without_router_creates_none(addon_repo, loguru_messages):
    test_app = addon_repo / "test-app"
    (test_app / "app" / "router.js").unlink()

    report = setup_docs(test_app)

    assert not (test_app / "app" / "router.js").exists()
    assert report.skipped == [test_app / "app" / "router.js"]
    assert any(r["level"].name == "WARNING" and "router.js" in r["message"] for r in loguru_messages)


def test_setup_without_manifest_renders_undefined(addon_repo):
    test_app = addon_repo / "test-app"
    (addon_repo / "addon" / "package.json").unlink()

    setup_docs(test_app)

    application = (test_app / "app" / "templates" / "application.hbs").read_text()
    assert '{{page-title "undefined"}}' in application


def test_malformed_manifest_aborts_before_writing(addon_repo):
    test_app = addon_repo / "test-app"
    (addon_repo / "addon" / "package.json").write_text('{"name": "Foo",')

    with pytest.raises(json.JSONDecodeError):
        setup_docs(test_app)

    assert (test_app / "app" / "router.js").read_text() == "// generated by ember-cli\n"
    assert not (test_app / "app" / "templates").exists()


def test_single_layout_reads_addon_from_base(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({"name": "classic-addon", "repository": "https://y"}))
    (tmp_path / "README.md").write_text("classic readme")

    setup_docs(tmp_path, layout=Layout.SINGLE)

    templates = tmp_path / "app" / "templates"
    assert '@name="classic-addon"' in (templates / "application.hbs").read_text()
    assert (templates / "docs" / "index.md").read_text() == "classic readme"
    assert not (tmp_path / "app" / "router.js").exists()


def test_setup_with_markup_like_name(addon_repo):
    """Square brackets in the addon name are printed, not parsed as console markup."""
    test_app = addon_repo / "test-app"
    (addon_repo / "addon" / "package.json").write_text(json.dumps({"name": "x[/foo]", "repository": "https://x"}))
    console = Console(file=io.StringIO(), width=200)

    setup_docs(test_app, console=console)

    assert "x[/foo]" in console.file.getvalue()
    assert '@name="x[/foo]"' in (test_app / "app" / "templates" / "application.hbs").read_text()


def test_dry_run_with_bracketed_directory(tmp_path):
    test_app = tmp_path / "[/weird]" / "test-app"
    (test_app / "app").mkdir(parents=True)
    (test_app / "app" / "router.js").write_text("// router\n")
    console = Console(file=io.StringIO(), width=400)

    report = setup_docs(test_app, dry_run=True, console=console)

    assert len(report.written) == 5
    assert "[/weird]" in console.file.getvalue()
