"""
Observability module.

Provides logging configuration for the resolution engine.
"""

from infra_config.observability.logger import configure_logging

__all__ = ["configure_logging"]
