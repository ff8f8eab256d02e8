import toml
import os
from .cli_logger import logger

CONFIG_FILE = "mysqlclient.toml"

DEFAULT_BUILD_SETTINGS = {
    "bundled": False,
    "generate": False,
    "out_dir": "build",
    "bindings_dir": "bindings",
    "header": "mysql.h",
    "generator_command": "ctypesgen",
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def build_settings(conf, path=".", **overrides):
    """
    Merges the [build] table of a loaded configuration with the defaults.

    Relative directories are resolved against the project path. Overrides
    that are None are ignored so unset CLI options fall through to the file.
    """
    settings = dict(DEFAULT_BUILD_SETTINGS)
    settings.update(conf.get("build", {}))
    for key, value in overrides.items():
        if value is not None:
            settings[key] = value

    for key in ("out_dir", "bindings_dir"):
        if not os.path.isabs(settings[key]):
            settings[key] = os.path.join(path, settings[key])
    return settings
