"""
Switchcord.

Searches the IGDB game catalog for Nintendo Switch titles.
"""

from switchcord.catalog import CatalogClient, GameRecord
from switchcord.config import Settings, get_settings
from switchcord.logger import get_logger, setup_logging

__version__ = "1.0.0"

__all__ = [
    "CatalogClient",
    "GameRecord",
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
