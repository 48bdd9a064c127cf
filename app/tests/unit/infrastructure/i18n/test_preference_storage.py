"""Tests for infrastructure.i18n.storage module."""

import pytest

from infrastructure.i18n import MemoryStorage


@pytest.mark.unit
class TestMemoryStorage:
    def test_get_set(self):
        storage = MemoryStorage()
        assert storage.get_item("lang") is None

        storage.set_item("lang", "en")
        assert storage.get_item("lang") == "en"

    def test_initial_items_are_copied(self):
        initial = {"lang": "fr"}
        storage = MemoryStorage(initial)
        storage.set_item("lang", "en")
        assert initial == {"lang": "fr"}
