"""Factory for creating the appropriate RateConfigProvider."""

from __future__ import annotations

import logging
import os

from src.data.interfaces import RateConfigProvider
from src.data.static_params import StaticDataProvider
from src.protocol.errors import ConfigError

logger = logging.getLogger(__name__)


def create_provider(config_path: str | None = None) -> RateConfigProvider:
    """Create a data provider, selecting static or file-backed.

    Parameters
    ----------
    config_path : str | None
        Path to a JSON market configuration file.  Falls back to the
        ``RATE_CONFIG_PATH`` environment variable when not supplied.

    Returns
    -------
    RateConfigProvider
        ``FileDataProvider`` when a readable, valid file is configured,
        otherwise ``StaticDataProvider``.
    """
    resolved_path = config_path or os.environ.get("RATE_CONFIG_PATH")
    if not resolved_path:
        return StaticDataProvider()

    from src.data.file_provider import FileDataProvider

    try:
        return FileDataProvider(resolved_path)
    except FileNotFoundError:
        logger.warning("Rate config %s not found; using static data", resolved_path)
        return StaticDataProvider()
    except (ConfigError, KeyError, TypeError, ValueError):
        logger.warning(
            "Invalid rate config %s; using static data", resolved_path, exc_info=True
        )
        return StaticDataProvider()
