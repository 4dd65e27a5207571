# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Configuration values.

Values are resolved from environment variables first, then from a
`planprinter.yaml` file in the working directory, and finally from defaults.
"""

import datetime
import typing
from os import environ
from pathlib import Path

_config_values: dict = {}

# we need a preliminary version of this variable
_PLANPRINTER_DEBUG = environ.get("PLANPRINTER_DEBUG") is not None


def parse_yaml(yaml_str: str) -> dict:
    """
    Parse the flat `key: value` subset of YAML used by the config file.

    Values which look like integers, floats or booleans are converted, `none`
    becomes None and everything else is kept as a string.
    """

    def line_value(value: str) -> typing.Any:
        value = value.strip()
        if value.isdigit():
            return int(value)
        if value.replace(".", "", 1).isdigit():
            return float(value)
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False
        if value.lower() == "none":
            return None
        return value

    result: dict = {}
    for line in yaml_str.splitlines():
        line = line.split("#")[0].strip()
        if not line or ":" not in line:
            continue
        key, value = line.split(":", 1)
        result[key.strip()] = line_value(value)
    return result


try:  # pragma: no cover
    _config_path = Path(".") / "planprinter.yaml"
    if _config_path.exists():
        with open(_config_path, "r", encoding="UTF8") as _config_file:
            _config_values = parse_yaml(_config_file.read())
        if _PLANPRINTER_DEBUG:
            print(f"{datetime.datetime.now()} [LOADER] Loading config from {_config_path}")
except (OSError, ValueError) as exception:  # pragma: no cover # use the defaults
    if _PLANPRINTER_DEBUG:
        print(
            f"{datetime.datetime.now()} [LOADER] Config file {_config_path} not used - {exception}"
        )


def get(key, default=None):
    value = environ.get(key)
    if value is None:
        value = _config_values.get(key, default)
    return value


def get_int(key, default: int) -> int:
    """
    Read a non-negative integer setting, values which are not usable fall back
    to the default.
    """
    value = get(key, default)
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = -1
    if number < 0:
        if _PLANPRINTER_DEBUG:
            print(
                f"{datetime.datetime.now()} [LOADER] Setting {key}={value!r} not used, defaulting to {default}"
            )
        return default
    return number


# fmt:off

# number of spaces per level of plan nesting
INDENT_WIDTH: int = get_int("INDENT_WIDTH", 4)

# fmt:on
