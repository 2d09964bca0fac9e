"""Shared fixtures for themectl tests."""

import logging
import plistlib
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
import structlog

from themectl.log import PACKAGE_LOGGER

TESTDATA = Path(__file__).parent / "testdata"


def theme_document(
    name: Optional[str] = "Test Theme",
    background: str = "#272822",
    foreground: str = "#f8f8f2",
    selection: str = "#49483e",
    rules: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Build a settings tree for a small valid theme."""
    if rules is None:
        rules = [
            {
                "name": "Comment",
                "scope": "comment",
                "settings": {"foreground": "#75715e", "fontStyle": "italic"},
            },
            {
                "name": "Keyword",
                "scope": "keyword, storage",
                "settings": {"foreground": "#f92672"},
            },
        ]
    document: Dict[str, Any] = {
        "settings": [
            {
                "settings": {
                    "background": background,
                    "foreground": foreground,
                    "selection": selection,
                }
            },
            *rules,
        ]
    }
    if name is not None:
        document["name"] = name
    return document


@pytest.fixture
def testdata_dir() -> Path:
    """Checked-in theme files."""
    return TESTDATA


@pytest.fixture
def write_theme() -> Callable[..., Path]:
    """Factory that writes a theme document as an XML property list."""
    def _write(path: Path, document: Optional[Dict[str, Any]] = None, **kwargs: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        data = document if document is not None else theme_document(**kwargs)
        path.write_bytes(plistlib.dumps(data))
        return path
    return _write


@pytest.fixture
def make_document() -> Callable[..., Dict[str, Any]]:
    """Factory for theme settings trees."""
    return theme_document


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test installed."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [logging.NullHandler()]
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
