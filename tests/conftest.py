"""Pytest configuration and shared fixtures for the mdreflow test suite.

This module provides shared fixtures and test configuration used across the
unit, integration and property-based tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import doc, para

from mdreflow.ast import BlockQuote, Document, List, ListItem

# Hypothesis profiles, selected with HYPOTHESIS_PROFILE
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def quoted_paragraph() -> Document:
    """Document with one block quote around one paragraph."""
    return doc(BlockQuote(children=[para("hi")]))


@pytest.fixture
def two_item_list() -> Document:
    """Document with a two-item bulleted list."""
    return doc(List(children=[ListItem(children=[para("a")]), ListItem(children=[para("b")])]))
