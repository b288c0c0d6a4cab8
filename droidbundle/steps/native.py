import re

from ..cli_logger import logger
from ..utils.command_executor import run_command, run_shell_command
from .base import ExecutionUnit, NativeLibrary, NoDeps, SharedLibraries

NEEDED_RE = re.compile(r"\(NEEDED\)\s+Shared library:\s*\[([^\]]+)\]")


class CompileNative(ExecutionUnit):
    """Build a shared library for one target with the NDK clang wrappers."""

    requires = NoDeps
    produces = NativeLibrary

    def __init__(self, ndk, descriptor, sources, output, cflags=(), ldflags=(), cpp=False,
                 executor=run_shell_command):
        self.ndk = ndk
        self.descriptor = descriptor
        self.sources = list(sources)
        self.output = output
        self.cflags = list(cflags)
        self.ldflags = list(ldflags)
        self.cpp = cpp
        self.executor = executor

    def describe(self):
        return f"CompileNative[{self.descriptor}]"

    def command(self):
        target, api = self.descriptor.target, self.descriptor.min_api
        cc, cxx = self.ndk.clang(target, api)
        platform_lib_dir = self.ndk.sysroot_platform_lib_dir(target, api)
        return (
            [cxx if self.cpp else cc, "-fPIC", "-shared"]
            + self.cflags
            + ["-o", self.output]
            + self.sources
            + [f"-L{platform_lib_dir}"]
            + self.ldflags
        )

    def run(self, deps=None):
        run_command(self.command(), executor=self.executor)
        logger.success(f"  - Built {self.output}")
        return NativeLibrary(self.output, self.descriptor.target)


class NeededLibraries(ExecutionUnit):
    """List the ``DT_NEEDED`` entries of a native library with readelf."""

    requires = NativeLibrary
    produces = SharedLibraries

    def __init__(self, ndk, executor=run_shell_command):
        self.ndk = ndk
        self.executor = executor

    def run(self, deps=None):
        command = self.ndk.readelf(deps.target) + ["-d", deps.path]
        stdout, _ = run_command(command, executor=self.executor)
        needed = tuple(NEEDED_RE.findall(stdout))
        logger.info(f"  - {deps.path} needs: {', '.join(needed) or 'nothing'}")
        return SharedLibraries(deps.path, needed)
