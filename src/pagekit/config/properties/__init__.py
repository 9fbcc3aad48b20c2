"""Typed configuration properties bound from ``pagekit.*`` sections."""

from pagekit.config.properties.pagination import ParserProperties

__all__ = ["ParserProperties"]
