import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection,
# whichever directory pytest was invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.configuration import (
    BuildSettings,
    Settings,
    TransitionSettings,
)
from infrastructure.logging import configure_logging
from infrastructure.services.providers import get_language_pair, get_settings

configure_logging()


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Clear the settings singletons around every test."""
    get_settings.cache_clear()
    get_language_pair.cache_clear()
    yield
    get_settings.cache_clear()
    get_language_pair.cache_clear()


@pytest.fixture
def fast_settings():
    """Settings with instant fades and default languages."""
    return Settings(transitions=TransitionSettings(TRANSITION_FADE_DURATION_MS=0))


@pytest.fixture
def site_settings(tmp_path):
    """Settings building the site sources under tmp_path/site into tmp_path/dist."""
    source_dir = tmp_path / "site"
    source_dir.mkdir()
    return Settings(
        build=BuildSettings(SOURCE_DIR=source_dir, OUTPUT_DIR=tmp_path / "dist"),
        transitions=TransitionSettings(TRANSITION_FADE_DURATION_MS=0),
    )
