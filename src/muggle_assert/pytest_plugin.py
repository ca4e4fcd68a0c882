"""pytest hooks: configuration options and failure diagnostics."""

from __future__ import annotations

from pathlib import Path

import pytest

from muggle_assert.config.loader import configure, load_settings, settings_from_env
from muggle_assert.errors import AssertionError
from muggle_assert.report import render_failure

SECTION_NAME = "muggle-assert"


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("muggle-assert")
    group.addoption(
        "--muggle-no-stack",
        action="store_true",
        default=False,
        help="Do not capture call stacks on assertion failures",
    )
    parser.addini(
        "muggle_assert_config",
        help="Path to a muggle-assert YAML config file",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    config_path = config.getini("muggle_assert_config")
    if config_path:
        path = Path(config_path)
        if not path.is_absolute():
            path = Path(str(config.rootpath)) / path
        settings = load_settings(path)
    else:
        settings = settings_from_env()
    if config.getoption("muggle_no_stack"):
        settings = settings.model_copy(
            update={"stack": settings.stack.model_copy(update={"capture": False})}
        )
    configure(settings)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    outcome = yield
    report = outcome.get_result()
    if call.excinfo is None or not isinstance(call.excinfo.value, AssertionError):
        return
    report.sections.append((SECTION_NAME, render_failure(call.excinfo.value)))
