"""
``config`` command: read and edit the TOML settings file.

    docker-engine-api config                                  # show everything
    docker-engine-api config --key daemon.url                 # show one value
    docker-engine-api config --key daemon.url --value tcp://10.0.0.5:2375
    docker-engine-api config --key logging.max_bytes --value 1048576
    docker-engine-api config --key daemon.timeout --delete
"""

import sys

import toml

from docker_engine_api.config import Config, reset_config
from docker_engine_api.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR


def show_value(config: Config, key: str) -> None:
    """Print one setting; tables are printed as TOML."""
    found = config.get(key)
    if found is None:
        print(f"Key not found: {key}")
    elif isinstance(found, dict):
        print(toml.dumps({key: found}), end="")
    else:
        print(found)


def store_value(config: Config, key: str, value: str) -> None:
    """Set ``key`` (converted to the setting's type) and write the file."""
    config.set(key, value)
    config.save()
    reset_config()
    print(f"Set {key} = {config.get(key)}")


def remove_value(config: Config, key: str) -> None:
    if config.get(key) is None:
        print(f"Key not found: {key}")
        return
    config.delete(key)
    config.save()
    reset_config()
    print(f"Deleted {key}")


def show_config(config: Config) -> None:
    """Print the effective settings (file, environment and defaults) as TOML."""
    print(f"# {config.config_path}")
    print(toml.dumps(config.to_dict()), end="")


def main(key: str | None = None, value: str | None = None, delete: bool = False) -> int:
    """
    Run the config command.

    Args:
        key: Dot-separated setting, e.g. ``daemon.url``
        value: New value for ``key``
        delete: Remove ``key`` instead of reading it

    Returns:
        EXIT_SUCCESS; EXIT_USAGE_ERROR when ``--value``/``--delete`` are given
        without ``--key`` or together; EXIT_ERROR when the file cannot be
        read or written or the value does not fit the setting
    """
    if (key is None and (value is not None or delete)) or (value is not None and delete):
        print("Error: use --value or --delete together with --key, not both", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        config = Config()
        if key is None:
            show_config(config)
        elif value is not None:
            store_value(config, key, value)
        elif delete:
            remove_value(config, key)
        else:
            show_value(config, key)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_SUCCESS
