"""Infrastructure modules for Folio.

Centralized infrastructure components:
- configuration: Settings management (Settings and its sections)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Language resolution, translation dictionaries, preference storage
- services: Dependency injection providers (get_settings, LanguagePairDep)
"""

# Configuration
from infrastructure.configuration import Settings

# Observability
from infrastructure.logging import configure_logging, get_module_logger

# Dependency Injection Services
from infrastructure.services import (
    get_settings,
)

__all__ = [
    # Configuration
    "Settings",
    # Observability
    "configure_logging",
    "get_module_logger",
    # Dependency Injection Services
    "get_settings",
]
