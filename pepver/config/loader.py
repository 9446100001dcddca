# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loading and merging for pepver.

pepver works with no configuration at all. A `pepver.yaml` file can adjust
how the CLI reports results and which metadata fields are mandatory.

Configuration Layers:
    1. **Built-in defaults** (DEFAULT_CONFIG below)
       - Always present

    2. **Project file** (pepver.yaml)
       - Given explicitly with --config, or
       - Found by walking upward from the working directory
       - Overrides the built-in defaults

Merge Behavior:
    The loader performs deep merging with "last wins" semantics:

    - **Dicts**: Recursively merged (keys from overlay override base)
    - **Lists**: Completely replaced (NOT appended/extended)
    - **Scalars**: Overwritten (strings, numbers, booleans)

Recognized Keys:
    ```yaml
    metadata:
      required_fields:                   # fields parse_metadata insists on
        - Metadata-Version
        - Name
        - Version
    output:
      format: text                       # text | json
    ```

    Any other key under "metadata" or "output" is rejected.

Error Handling:
    - ConfigError: Explicit file doesn't exist, YAML parse errors, empty
        files, non-mapping top level, or invalid values
    - All errors are chained with "from err" for better debugging

Example:
    Basic usage:
        ```python
        from pepver.config import load_effective_config

        cfg = load_effective_config()
        print(cfg["output"]["format"])  # Output: text
        ```
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from pepver.exceptions import ConfigError

CONFIG_FILENAME = "pepver.yaml"

OUTPUT_FORMATS = ("text", "json")

DEFAULT_CONFIG: dict[str, Any] = {
    "metadata": {
        "required_fields": ["Metadata-Version", "Name", "Version"],
    },
    "output": {
        "format": "text",
    },
}


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Loads a YAML file and returns the parsed Python object.

    Args:
        p: Path to the YAML file to load.

    Returns:
        The parsed Python object from the YAML file.

    Raises:
        ConfigError: When file does not exist, invalid YAML (parse error), or empty files.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merges two dicts with "overlay wins" semantics.

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


# -------------------------------
# Discovery
# -------------------------------


def _find_config_file(start_dir: Path) -> Path | None:
    """Walks upward from start_dir looking for a pepver.yaml file.

    Args:
        start_dir: The directory to start searching from.

    Returns:
        Path to the nearest pepver.yaml, or None if there is none.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


# -------------------------------
# Validation
# -------------------------------


def _validate_config(cfg: dict[str, Any], source: Path) -> None:
    """Checks the merged config for values pepver cannot use.

    Raises:
        ConfigError: On the first invalid value found.
    """
    for section in ("metadata", "output"):
        if not isinstance(cfg.get(section), dict):
            raise ConfigError(f"'{section}' must be a mapping in {source}")
        unknown = sorted(set(cfg[section]) - set(DEFAULT_CONFIG[section]))
        if unknown:
            raise ConfigError(
                f"unknown key(s) under '{section}': {', '.join(map(str, unknown))} in {source}"
            )

    fmt = cfg["output"].get("format")
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, "
            f"got {fmt!r} in {source}"
        )

    required = cfg["metadata"].get("required_fields")
    if not isinstance(required, list) or not all(isinstance(x, str) for x in required):
        raise ConfigError(f"metadata.required_fields must be a list of strings in {source}")


# -------------------------------
# Public API
# -------------------------------


def load_effective_config(
    config_path: Path | None = None,
    *,
    start_dir: Path | None = None,
) -> dict[str, Any]:
    """Loads the effective pepver configuration.

    Steps:
        1. Start from a copy of DEFAULT_CONFIG.
        2. Use 'config_path' if given, else search upward from 'start_dir'
           (default: current directory) for pepver.yaml.
        3. Deep-merge the file on top of the defaults.
        4. Validate the merged result.

    Args:
        config_path: Explicit config file. It must exist.
        start_dir: Directory to start the upward search from.

    Returns:
        The merged configuration dict. Without any config file this equals
        DEFAULT_CONFIG.

    Raises:
        ConfigError: On a missing explicit file, YAML errors, an empty file,
            a non-mapping top level, or invalid values.
    """
    from pepver.logging import get_global_logger

    logger = get_global_logger()
    merged = copy.deepcopy(DEFAULT_CONFIG)

    if config_path is None:
        config_path = _find_config_file((start_dir or Path.cwd()).resolve())
        if config_path is None:
            logger.verbose("CONFIG", "No pepver.yaml found; using built-in defaults")
            return merged
    else:
        config_path = Path(config_path)

    logger.verbose("CONFIG", f"Loading: {config_path}")
    data = _load_yaml_file(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {config_path}")

    logger.debug("CONFIG", "--- Content from config file ---")
    for line in yaml.safe_dump(data, default_flow_style=False, sort_keys=False).splitlines():
        logger.debug("CONFIG", "  " + line)

    merged = _deep_merge_dicts(merged, data)
    _validate_config(merged, config_path)
    return merged
