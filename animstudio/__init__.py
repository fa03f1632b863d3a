"""Vectors, an entity-component registry, frame pacing, mouse grabs, text editing and binary state and project files."""

__version__ = "0.1.0"