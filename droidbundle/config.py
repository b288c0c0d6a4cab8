import os
import toml
from .cli_logger import logger

CONFIG_FILE = "droidbundle.toml"

DEFAULT_BUILD_DIR = os.path.join("target", "android")
DEFAULT_MIN_SDK_VERSION = 21
DEFAULT_TARGET_SDK_VERSION = 33
DEFAULT_BUILD_TARGETS = ["arm64-v8a"]


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


def android_settings(conf, path="."):
    """The ``[android]`` table with defaults filled in and paths made absolute."""
    android = dict(conf.get("android", {}))
    app = conf.get("app", {})
    android.setdefault("min_sdk_version", DEFAULT_MIN_SDK_VERSION)
    android.setdefault("target_sdk_version", DEFAULT_TARGET_SDK_VERSION)
    android.setdefault("build_targets", list(DEFAULT_BUILD_TARGETS))
    android["res"] = os.path.join(path, app.get("res", "res"))
    android["assets"] = os.path.join(path, app.get("assets", "assets"))
    android["build_dir"] = os.path.join(path, app.get("build_dir", DEFAULT_BUILD_DIR))
    return android
