"""Shared fixtures for unit tests."""

import pytest

from helpers import CollectingReporter, Tracker


@pytest.fixture
def tracker() -> Tracker:
    return Tracker()


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()
