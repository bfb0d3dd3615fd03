"""Utilities shared by the entry points.

Components:
    logconfig: Handler and format setup for the package logger
"""

from .logconfig import setup_logging

__all__ = ["setup_logging"]
