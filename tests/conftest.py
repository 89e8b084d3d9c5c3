import json

import pytest
from loguru import logger


@pytest.fixture
def loguru_messages():
    """Collect loguru records emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def addon_repo(tmp_path):
    """A v2 addon monorepo: <repo>/addon and <repo>/test-app with a router."""
    addon = tmp_path / "addon"
    test_app = tmp_path / "test-app"
    addon.mkdir()
    (test_app / "app").mkdir(parents=True)
    (test_app / "app" / "router.js").write_text("// generated by ember-cli\n")
    (addon / "package.json").write_text(json.dumps({"name": "Foo", "repository": "https://x"}))
    (addon / "README.md").write_text("# Foo\n\nAn addon.\n")
    return tmp_path
