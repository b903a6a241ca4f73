"""Reporters package for rendering report rows."""

from .base_reporter import BaseReporter
from .console_reporter import ConsoleReporter

__all__ = ["BaseReporter", "ConsoleReporter"]
