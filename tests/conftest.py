"""Shared pytest options and fixtures."""

from pathlib import Path

import pytest

TESTDATA = Path(__file__).resolve().parent / "testdata"


def pytest_addoption(parser):
    parser.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="Rewrite golden files under tests/testdata instead of comparing.",
    )


@pytest.fixture
def golden(request):
    """Compare text with tests/testdata/<name>, or rewrite it with --update-golden."""
    update = request.config.getoption("--update-golden")

    def check(name: str, actual: str) -> None:
        path = TESTDATA / name
        if update:
            path.write_text(actual, encoding="utf-8")
            return
        assert actual == path.read_text(encoding="utf-8")

    return check
