"""
Web application configuration for the MRP service.

Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mrp import __version__
from mrp.config.schema import MrpConfig, get_default_config


@dataclass
class WebConfig:
    """Configuration for the MRP web application."""

    # Application settings
    app_name: str = "MRP Engine"
    app_version: str = __version__
    debug: bool = False

    # Engine settings
    engine_config_path: Optional[Path] = None

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "WebConfig":
        """Create config from environment variables."""
        config_path = os.getenv("MRP_ENGINE_CONFIG", "")
        return cls(
            debug=os.getenv("MRP_DEBUG", "").lower() in ("true", "1", "yes"),
            engine_config_path=Path(config_path) if config_path else None,
            host=os.getenv("MRP_HOST", "127.0.0.1"),
            port=int(os.getenv("MRP_PORT", "8000")),
        )

    def load_engine_config(self) -> MrpConfig:
        """Load the planning engine configuration (defaults if unset)."""
        if self.engine_config_path is None:
            return get_default_config()
        return MrpConfig.from_file(self.engine_config_path)


def get_config() -> WebConfig:
    """Get the web configuration instance."""
    return WebConfig.from_env()


# Global config instance (lazy initialization)
_config: Optional[WebConfig] = None


def get_settings() -> WebConfig:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = get_config()
    return _config
