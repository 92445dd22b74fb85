"""Extensibility SDK - manifests and runtime context for host application addons."""

__version__ = "1.0.0"
