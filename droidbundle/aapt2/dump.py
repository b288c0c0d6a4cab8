from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import Aapt2Command, flag, option


class SubCommand(Enum):
    APC = "apc"
    BADGING = "badging"
    CONFIGURATIONS = "configurations"
    OVERLAYABLE = "overlayable"
    PACKAGENAME = "packagename"
    PERMISSIONS = "permissions"
    STRINGS = "strings"
    STYLEPARENTS = "styleparents"
    RESOURCES = "resources"
    XMLSTRINGS = "xmlstrings"
    XMLTREE = "xmltree"


@dataclass(frozen=True)
class Aapt2Dump(Aapt2Command):
    """Print one facet of a built package (badging, resource table, ...)."""

    stage = "dump"

    subcommand: SubCommand = SubCommand.BADGING
    package: str = ""
    no_values: bool = False
    file: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        object.__setattr__(self, "subcommand", SubCommand(self.subcommand))

    def with_no_values(self, enabled=True):
        return self._with(no_values=enabled)

    def entry(self, path):
        """Restrict ``xmltree``/``xmlstrings`` to one file inside the package."""
        return self._with(file=path)

    def with_verbose(self, enabled=True):
        return self._with(verbose=enabled)

    def stage_args(self):
        args = [self.subcommand.value]
        flag(args, self.no_values, "--no-values")
        option(args, self.file, "--file")
        flag(args, self.verbose, "-v")
        args.append(str(self.package))
        return args
