"""PageKit Core — configuration loading and binding."""

from pagekit.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
