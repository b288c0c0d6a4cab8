from dataclasses import dataclass
from typing import Tuple

from .base import Aapt2Command


@dataclass(frozen=True)
class Aapt2Diff(Aapt2Command):
    """Report resource-level differences between packages."""

    stage = "diff"

    packages: Tuple[str, ...] = ()

    def __post_init__(self):
        packages = tuple(str(p) for p in self.packages)
        if len(packages) < 2:
            raise ValueError("aapt2 diff needs at least two packages")
        object.__setattr__(self, "packages", packages)

    def stage_args(self):
        return list(self.packages)
