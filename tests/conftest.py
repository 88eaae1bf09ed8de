"""
Configuration file for pytest.

This file ensures that the src directory is in the Python path
so that tests can import modules from the package.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from sortcheckstyle.model import Element, parse_document  # noqa: E402

SAMPLES_DIR = Path(__file__).parent / "samples"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() detaches the package logger from the root logger; undo that so caplog keeps working."""
    yield
    package_logger = logging.getLogger("sortcheckstyle")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def parse_root():
    """Parse an XML string and return its root as an Element."""
    def _parse(xml: str) -> Element:
        return parse_document(xml.encode("utf-8")).root
    return _parse


def get_sample_files(pattern: str = "*.xml"):
    return sorted(SAMPLES_DIR.glob(pattern))


def child_names(element: Element):
    return [child.get("name") for child in element.element_children]
