import importlib.metadata
import re

import requests

from . import __version__
from .cli_logger import logger

PYPI_URL = "https://pypi.org/pypi/droidbundle/json"
SEMVER_RE = re.compile(r"^\s*v?(\d+)\.(\d+)\.(\d+)")


def current_version():
    try:
        return importlib.metadata.version("droidbundle")
    except importlib.metadata.PackageNotFoundError:
        return __version__


def parse_version(version_string):
    """``(major, minor, patch)`` or ``None`` when the string is not semver-like."""
    match = SEMVER_RE.match(version_string or "")
    if not match:
        return None
    return tuple(int(part) for part in match.groups())


def is_same(version1, version2, default_result):
    """True if both versions have the same major.minor.patch.

    Unparseable input yields ``default_result``.
    """
    values1 = parse_version(version1)
    values2 = parse_version(version2)
    if values1 is None or values2 is None:
        return default_result
    return values1 == values2


def is_newer(old_string, new_string, default_result):
    """True if ``new_string`` is a later release than ``old_string``."""
    old_values = parse_version(old_string)
    new_values = parse_version(new_string)
    if old_values is None or new_values is None:
        return default_result
    return new_values > old_values


def get_latest_version(timeout=10):
    """Latest droidbundle version on PyPI, ``None`` if it cannot be fetched."""
    try:
        resp = requests.get(PYPI_URL, timeout=timeout)
        resp.raise_for_status()
        return resp.json()["info"]["version"]
    except requests.exceptions.RequestException as e:
        logger.debug(f"Could not check for a newer droidbundle version: {e}")
        return None
    except (KeyError, ValueError):
        logger.debug("Could not parse the PyPI response for droidbundle.")
        return None


def check(current=None, latest=None):
    """Tell the user when a newer release exists. Never raises."""
    current = current or current_version()
    if latest is None:
        latest = get_latest_version()
    if latest is None:
        return False
    if is_newer(current, latest, False):
        logger.warning("NEW DROIDBUNDLE VERSION FOUND!!!")
        logger.info(f"Current version: {current}")
        logger.info(f"Latest: {latest}")
        logger.info("Upgrade with: pip install --upgrade droidbundle")
        return True
    if is_same(current, latest, False):
        logger.info(f"You are using the latest version of droidbundle: {latest}")
    return False
