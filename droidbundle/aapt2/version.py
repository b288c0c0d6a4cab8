import re
from dataclasses import dataclass

from .base import Aapt2Command

VERSION_RE = re.compile(r"Android Asset Packaging Tool \(aapt\)\s+(\S+)")


@dataclass(frozen=True)
class Aapt2Version(Aapt2Command):
    stage = "version"

    version: str = ""

    def stage_args(self):
        return []

    @staticmethod
    def parse(output):
        """Extract the version from ``aapt2 version`` output, ``None`` if absent."""
        match = VERSION_RE.search(output or "")
        return match.group(1) if match else None

    def matches(self, output):
        reported = self.parse(output)
        return reported is not None and reported.startswith(self.version)
