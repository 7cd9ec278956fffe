"""
Configuration loading utilities for gel analysis.

Single public entry point:
    load_gel_analysis_config(...) -> GelAnalysisConfig

Configs can come from a YAML file, an already-loaded dictionary, or nothing
at all (defaults). Supports nested overrides via double-underscore keys, e.g.
foreground__warmup_frames_to_discard=0.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ValidationError

from .processing.config_models import GelAnalysisConfig

logger = logging.getLogger(__name__)

__all__ = [
    "load_gel_analysis_config",
    "save_config_to_yaml",
]


def _apply_nested_overrides(
    data: Dict[str, Any], overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """Apply nested overrides using double-underscore syntax."""
    result = data.copy()
    for key, value in overrides.items():
        if "__" in key:
            parts = key.split("__")
            cur = result
            for part in parts[:-1]:
                if part not in cur or not isinstance(cur[part], dict):
                    cur[part] = {}
                else:
                    cur[part] = dict(cur[part])
                cur = cur[part]
            cur[parts[-1]] = value
        else:
            result[key] = value
    return result


def _load_config_dict(
    config_source: Optional[Union[str, Path, Dict[str, Any]]], **overrides: Any
) -> Dict[str, Any]:
    """Internal: load raw config dict from path/dict and apply __ overrides."""
    if config_source is None:
        data = {}
    elif isinstance(config_source, (str, Path)):
        path = Path(config_source)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        logger.info("Loaded gel analysis configuration from %s", path)
    elif isinstance(config_source, dict):
        data = config_source.copy()
        logger.info("Using provided configuration dictionary")
    else:
        raise ValueError(f"Invalid config_source type: {type(config_source)}")

    if data is None:
        data = {}

    return _apply_nested_overrides(data, overrides)


def load_gel_analysis_config(
    config_source: Optional[Union[str, Path, Dict[str, Any]]] = None,
    **overrides: Any,
) -> GelAnalysisConfig:
    r"""
    Load and validate a GelAnalysisConfig from a path or dict, with __ overrides.

    Parameters
    ----------
    config_source : Union[str, Path, Dict[str, Any]], optional
        - str or Path: path to a .yaml/.yml file
        - dict: already-loaded configuration dictionary
        - None: start from the defaults
    **overrides : Any
        Nested overrides using double-underscore syntax
        (e.g., histogram__canvas_width=512).

    Returns
    -------
    GelAnalysisConfig
        Validated configuration model.

    Raises
    ------
    FileNotFoundError
        If a config path does not exist.
    ValueError
        If the configuration does not validate.
    """
    data = _load_config_dict(config_source, **overrides)
    try:
        return GelAnalysisConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid gel analysis configuration: {e}") from e


def save_config_to_yaml(config: BaseModel, path: Union[str, Path]) -> Path:
    """
    Write a config model to a YAML file.

    Enums are written as their values so the file can be loaded back with
    :func:`load_gel_analysis_config`.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    logger.info("Saved configuration to %s", path)
    return path
