"""Structured logging package."""

from src.logs.logger import get_logger

__all__ = ["get_logger"]
