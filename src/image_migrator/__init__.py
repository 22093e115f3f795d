"""Migrate legacy image records into the new image table"""

__version__ = "0.1.0"
