"""Configuration loading for glive."""

from pathlib import Path
from typing import Any

from .core.exceptions import ConfigValidationError
from .core.settings import find_config_file, load_settings, read_config_file

# Config keys that can be inspected via `glive config`
CONFIGURABLE_KEYS = {
    "build.architecture": {
        "type": str,
        "default": None,
        "description": "Target architecture passed as grml-live -a (e.g. amd64)",
    },
    "build.classes": {
        "type": str,
        "default": None,
        "description": "Comma-separated FAI classes passed as grml-live -c",
    },
    "build.suite": {
        "type": str,
        "default": None,
        "description": "Debian suite passed as grml-live -s (e.g. bookworm)",
    },
    "build.build_only": {
        "type": bool,
        "default": None,
        "description": "Only build the chroot and ISO, skip FAI (grml-live -b)",
    },
    "build.extract_iso": {
        "type": str,
        "default": None,
        "description": "ISO to extract instead of building from scratch (grml-live -e)",
    },
    "build.output_directory": {
        "type": str,
        "default": None,
        "description": "Output directory (defaults to $WORKSPACE)",
    },
    "build.version": {
        "type": str,
        "default": None,
        "description": "Image version (defaults to build$BUILD_NUMBER)",
    },
    "build.version_from_date": {
        "type": bool,
        "default": None,
        "description": "Use today's date (YYYYMMDD) as version when none is set",
    },
    "build.codename": {
        "type": str,
        "default": None,
        "description": "Release name (defaults to autobuild-<version>)",
    },
    "build.name": {
        "type": str,
        "default": None,
        "description": "Grml name (defaults to autobuild)",
    },
    "changelist.output_filename": {
        "type": str,
        "default": "changelog.txt",
        "description": "Changelog file written into the workspace",
    },
    "changelist.dpkg_list_old_name": {
        "type": str,
        "default": "dpkg.list.old",
        "description": "Previous package list, relative to the workspace",
    },
    "changelist.package_prefix": {
        "type": str,
        "default": "",
        "description": "Name prefix of packages built from own git repos",
    },
    "changelist.git_url_base": {
        "type": str,
        "default": "",
        "description": "Base URL of own package git repos",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": True,
        "description": "Output debug logs to ~/.glive/glive.log",
    },
}


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Nested dict of all sections. "_config_file" names the file that was
        used; "_config_error" says why a file was skipped.

    Raises:
        ConfigFileError: If a config value has the wrong type
    """
    config_file = read_config_file(config_path or find_config_file(start_dir))
    config = load_settings(config_file).model_dump()
    if config_file.error:
        config["_config_error"] = config_file.error
    elif config_file.path:
        config["_config_file"] = str(config_file.path)
    return config


def config_get(key: str, start_dir: str | None = None) -> Any:
    """
    Get the effective value of a config key.

    Raises:
        ConfigValidationError: If the key is not a known config key
    """
    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(f"Unknown config key: {key}", key=key)
    section, _, name = key.partition(".")
    return load_config(start_dir=start_dir)[section].get(name)


def config_list() -> dict:
    """Return all configurable keys with their type, default and description."""
    return CONFIGURABLE_KEYS
