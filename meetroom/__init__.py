"""Meetroom data-access layer: models, safe-attribute repositories, migrations."""

__version__ = "0.1.0"
