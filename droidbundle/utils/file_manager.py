import os
import shutil
from ..cli_logger import logger


def ensure_dir(path):
    """Create ``path`` (and parents) if needed and return it."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.error(f"Error creating directory {path}: {e}")
        raise
    return path


def clean_dir(path):
    """Remove ``path`` with everything below it and create it again, empty."""
    if os.path.isdir(path):
        try:
            shutil.rmtree(path)
        except OSError as e:
            logger.error(f"Error removing {path}: {e}")
            raise
    return ensure_dir(path)


def write_text_file(path, content):
    """Create or truncate ``path`` and write ``content`` to it."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Error writing {path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        raise
    return path


def collect_files(root, suffix=None):
    """All regular files below ``root``, sorted, optionally filtered by suffix."""
    found = []
    for dirpath, _, files in os.walk(root):
        for name in files:
            if suffix is None or name.endswith(suffix):
                found.append(os.path.join(dirpath, name))
    return sorted(found)
