"""Fixtures for preview server tests."""

import pytest

from modules.content import SitePipeline
from tests.factories.content import make_site_tree


@pytest.fixture
def built_site(site_settings):
    """A site built from the default source tree; returns the output directory."""
    make_site_tree(site_settings.build.SOURCE_DIR)
    SitePipeline(site_settings).run()
    return site_settings.build.OUTPUT_DIR
