"""CLI utility functions"""

import os
from pathlib import Path

from .. import config


def get_instance_path(path: str | None = None) -> Path:
    """Get instance path

    Args:
        path: Custom path (relative or absolute), None for the instance
            selected by IMAGE_MIGRATOR_INSTANCE_PATH or ~/.image-migrator

    Returns:
        Resolved absolute path
    """
    if path is None:
        return config.get_instance_path().resolve()
    return Path(path).resolve()


def use_instance(instance_path: Path) -> None:
    """Point settings loading at the instance's config.toml"""
    os.environ[config.INSTANCE_PATH_ENV] = str(instance_path)


def is_initialized(instance_path: Path) -> bool:
    """Check if instance has a config.toml"""
    return (instance_path / "config.toml").exists()
