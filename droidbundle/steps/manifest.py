import os

from ..cli_logger import logger
from ..utils.file_manager import write_text_file
from .base import ExecutionUnit, GeneratedManifest, NoDeps

MANIFEST_FILENAME = "AndroidManifest.xml"


class GenAndroidManifest(ExecutionUnit):
    """Write a rendered manifest to ``<out_dir>/AndroidManifest.xml``.

    ``manifest`` is anything whose ``str()`` is the document, typically an
    :class:`~droidbundle.manifest.AndroidManifest`. The file is truncated on
    every run.
    """

    requires = NoDeps
    produces = GeneratedManifest

    def __init__(self, out_dir, manifest):
        self.out_dir = out_dir
        self.manifest = manifest

    def run(self, deps=None):
        path = os.path.join(self.out_dir, MANIFEST_FILENAME)
        write_text_file(path, f"{self.manifest}\n")
        logger.success(f"  - Generated {path}")
        return GeneratedManifest(path)
