"""Utilities: logging."""

from graph_email_client.utils.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
