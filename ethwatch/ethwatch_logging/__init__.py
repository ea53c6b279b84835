"""
Structured logging for ethwatch.

Use get_logger() in every module for JSON, aggregation-friendly output.
"""

from ethwatch.ethwatch_logging.logger import bind_address, get_logger

__all__ = ["bind_address", "get_logger"]
