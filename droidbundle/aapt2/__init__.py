"""Android Asset Packaging Tool 2 (aapt2).

aapt2 splits packaging into ``compile`` and ``link``: when one resource
changes only that file is recompiled, then everything is linked again.
Methods here only describe invocations; :class:`Aapt2Runner` executes
them, one process per call or through a :class:`DaemonSession`.
"""

from .base import Aapt2Command
from .compile import Aapt2Compile
from .convert import Aapt2Convert, OutputFormat
from .daemon import Aapt2Daemon, DaemonResponse, DaemonSession
from .diff import Aapt2Diff
from .dump import Aapt2Dump, SubCommand
from .link import Aapt2Link
from .optimize import Aapt2Optimize
from .runner import Aapt2Runner
from .version import Aapt2Version


class Aapt2:
    """Stateless factory with one method per aapt2 stage."""

    @staticmethod
    def compile(input_res, compiled_res):
        """Compiles resources to be linked into an apk."""
        return Aapt2Compile(inputs=tuple(input_res), output=compiled_res)

    @staticmethod
    def link(inputs, output_apk, manifest):
        """Links compiled resources and a manifest into an apk."""
        return Aapt2Link(inputs=tuple(inputs), output_apk=output_apk, manifest=manifest)

    @staticmethod
    def dump(subcommand, filename_apk):
        """Prints information about an apk produced by ``link``."""
        return Aapt2Dump(subcommand=subcommand, package=filename_apk)

    @staticmethod
    def diff(files):
        """Prints the resource differences between two or more apks."""
        return Aapt2Diff(packages=tuple(files))

    @staticmethod
    def optimize(input_apk, output_apk, config=None):
        """Performs resource optimizations on an apk."""
        return Aapt2Optimize(input_apk=input_apk, output_apk=output_apk, config=config)

    @staticmethod
    def convert(input_apk, output=None, output_format=OutputFormat.PROTO):
        """Converts an apk between binary and proto formats."""
        return Aapt2Convert(input_apk=input_apk, output=output, output_format=output_format)

    @staticmethod
    def version(version=""):
        """Prints the version of aapt."""
        return Aapt2Version(version=version)

    @staticmethod
    def daemon(trace_folder=None):
        """Runs aapt2 in daemon mode."""
        return Aapt2Daemon(trace_folder=trace_folder)


__all__ = [
    "Aapt2",
    "Aapt2Command",
    "Aapt2Compile",
    "Aapt2Convert",
    "Aapt2Daemon",
    "Aapt2Diff",
    "Aapt2Dump",
    "Aapt2Link",
    "Aapt2Optimize",
    "Aapt2Runner",
    "Aapt2Version",
    "DaemonResponse",
    "DaemonSession",
    "OutputFormat",
    "SubCommand",
]
