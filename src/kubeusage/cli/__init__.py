# src/kubeusage/cli/__init__.py
"""
kubeusage CLI Package

This package exposes the top-level Typer `app` used by tests and the
console entrypoint.
"""

from .main import app

__all__ = ["app"]
