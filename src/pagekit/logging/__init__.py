"""PageKit Logging — hexagonal logging port and structlog adapter."""

from pagekit.logging.port import LoggingPort
from pagekit.logging.structlog_adapter import StructlogAdapter, configure_logging

__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging"]
