"""
Configuration Resolution for Component Rendering

Builds the effective settings from three layers (later overrides earlier):

1. Built-in defaults (defaults.py)
2. YAML config file (COMPONENTS_CONFIG_PATH or an explicit path)
3. Environment variables (COMPONENTS_ROOT)

Example config file:

    view_paths:
      - vendor/plugins/scaffolding/components
    template_extensions: [".jinja", ".txt"]
    environment:
      autoescape: true
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from componentry.contexts.templating.defaults import get_default_settings

load_dotenv()


def components_root() -> Path:
    """
    Get the conventional search root for component templates.

    Returns:
        COMPONENTS_ROOT from the environment, or ./app/components
    """
    root = os.getenv("COMPONENTS_ROOT")
    if root:
        return Path(root)
    return Path.cwd() / "app" / "components"


def load_settings(config_path: Path = None) -> Dict[str, Any]:
    """
    Load component settings, merging a YAML config over the defaults.

    Args:
        config_path: Optional path to config file (defaults to the
                     COMPONENTS_CONFIG_PATH env variable, if set)

    Returns:
        Plain dict with view_paths, template_extensions and environment keys

    Raises:
        ValueError: If the config file contains unknown top-level keys
    """
    if config_path is None:
        env_path = os.getenv("COMPONENTS_CONFIG_PATH")
        config_path = Path(env_path) if env_path else None

    settings = OmegaConf.create(get_default_settings())

    if config_path is not None:
        overrides = OmegaConf.load(config_path)
        unknown = set(overrides.keys()) - set(settings.keys())
        if unknown:
            raise ValueError(
                f"Unknown settings in {config_path}: {sorted(unknown)}. "
                f"Valid keys: {sorted(settings.keys())}"
            )
        settings = OmegaConf.merge(settings, overrides)

    return OmegaConf.to_container(settings, resolve=True)


def default_view_paths(settings: Dict[str, Any] = None) -> List[Path]:
    """
    Get the search roots the root component type starts with.

    Relative paths from the config file are kept relative; they resolve
    against the working directory at lookup time.

    Args:
        settings: Settings from load_settings() (loaded if omitted)

    Returns:
        [components_root()] followed by any configured view_paths
    """
    if settings is None:
        settings = load_settings()

    paths = [components_root()]
    for extra in settings.get("view_paths") or []:
        path = Path(extra)
        if path not in paths:
            paths.append(path)
    return paths
