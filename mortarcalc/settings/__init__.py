"""Runtime configuration: environment profiles and overrides."""

from mortarcalc.settings.config_manager import ConfigManager

__all__ = ["ConfigManager"]
