"""Fixtures for page transition tests."""

import pytest

from modules.navigation import create_transition_controller
from tests.factories.navigation import make_client, make_window


@pytest.fixture
def requests_log():
    return []


@pytest.fixture
def window():
    return make_window("/")


@pytest.fixture
def client(requests_log):
    return make_client(requests=requests_log)


@pytest.fixture
def make_controller(fast_settings, requests_log):
    """Build an attached controller for a window and optional page table."""

    def _make(window, pages=None, statuses=None, client=None):
        client = client or make_client(pages, statuses, requests=requests_log)
        controller = create_transition_controller(window, client, settings=fast_settings)
        controller.attach()
        return controller

    return _make


@pytest.fixture
def controller(window, make_controller):
    return make_controller(window)
