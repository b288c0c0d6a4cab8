import os
import sys

from .cli_logger import logger
from .exceptions import (
    AndroidNdkNotFound,
    PathNotFound,
    PlatformNotFound,
    UnsupportedHost,
    UnsupportedTarget,
)

# Checked in order, first one set wins.
NDK_ENV_VARS = ("ANDROID_NDK_ROOT", "ANDROID_NDK_PATH", "ANDROID_NDK_HOME", "NDK_HOME")
HOST_ENV_VAR = "HOST"

# Side-by-side NDK bundled with older SDK installations.
SDK_NDK_BUNDLE = "ndk-bundle"

# Lowest API level with a platform library directory, and the upper scan bound.
MIN_PLATFORM = 2
MAX_PLATFORM = 100

# substring of the HOST variable -> prebuilt toolchain tag
HOST_TAGS = (
    ("linux", "linux"),
    ("macos", "darwin"),
    ("darwin", "darwin"),
    ("windows", "windows"),
)

PLATFORM_TAGS = (
    ("linux", "linux"),
    ("darwin", "darwin"),
    ("win32", "windows"),
    ("cygwin", "windows"),
)


def host_tag(host=None, platform=None):
    """Map the machine we are running on to an NDK prebuilt tag.

    The ``HOST`` environment variable wins over ``sys.platform`` so that
    cross builds driven by another build system pick the right prebuilt.
    """
    if host is None:
        host = os.environ.get(HOST_ENV_VAR)
    if platform is None:
        platform = sys.platform

    if host:
        for needle, tag in HOST_TAGS:
            if needle in host:
                return tag
    for prefix, tag in PLATFORM_TAGS:
        if platform.startswith(prefix):
            return tag

    if host:
        raise UnsupportedHost(host)
    raise UnsupportedTarget()


def _clang_suffix(tag):
    return ".cmd" if tag == "windows" else ""


def _exe_suffix(tag):
    return ".exe" if tag == "windows" else ""


def _require(path):
    if not os.path.exists(path):
        logger.error(f"Error: expected NDK path not found: {path}")
        raise PathNotFound(path)
    return path


class AndroidNdk:
    """An installed Android NDK.

    Nothing is cached: every accessor checks the filesystem again, so a
    value is only meaningful on the host it was resolved on.
    """

    def __init__(self, ndk_path):
        self.ndk_path = ndk_path

    def __repr__(self):
        return f"AndroidNdk({self.ndk_path!r})"

    @classmethod
    def from_env(cls, sdk_path=None):
        """Locate the NDK from the environment, falling back to ``<sdk>/ndk-bundle``."""
        for var in NDK_ENV_VARS:
            value = os.environ.get(var)
            if value:
                logger.info(f"Using Android NDK from ${var}: {value}")
                return cls(value)

        if sdk_path:
            bundled = os.path.join(sdk_path, SDK_NDK_BUNDLE)
            if os.path.exists(bundled):
                logger.info(f"Using Android NDK bundled with the SDK: {bundled}")
                return cls(bundled)

        logger.error("Error: Android NDK not found.")
        raise AndroidNdkNotFound()

    def toolchain_dir(self):
        tag = host_tag()
        prebuilt = os.path.join(self.ndk_path, "toolchains", "llvm", "prebuilt")
        toolchain_dir = os.path.join(prebuilt, f"{tag}-x86_64")
        if not os.path.exists(toolchain_dir):
            toolchain_dir = os.path.join(prebuilt, tag)
        return _require(toolchain_dir)

    def bin_dir(self):
        return os.path.join(self.toolchain_dir(), "bin")

    def clang(self, target, platform):
        """Return ``(clang, clang++)`` wrappers for ``target`` at API ``platform``."""
        suffix = _clang_suffix(host_tag())
        bin_name = f"{target.ndk_llvm_triple}{platform}-clang"
        bin_path = self.bin_dir()
        clang = _require(os.path.join(bin_path, f"{bin_name}{suffix}"))
        clang_pp = _require(os.path.join(bin_path, f"{bin_name}++{suffix}"))
        return clang, clang_pp

    def toolchain_bin(self, name, target):
        """Return ``<triple>-<name>`` from the toolchain, e.g. ``readelf``."""
        suffix = _exe_suffix(host_tag())
        return _require(os.path.join(self.bin_dir(), f"{target.ndk_triple}-{name}{suffix}"))

    def llvm_tool(self, name):
        """Return a triple-less LLVM tool such as ``llvm-ar``."""
        suffix = _exe_suffix(host_tag())
        return _require(os.path.join(self.bin_dir(), f"llvm-{name}{suffix}"))

    def readelf(self, target):
        """Argument list that runs the ELF inspector for ``target``."""
        return [self.toolchain_bin("readelf", target)]

    def sysroot(self):
        return _require(os.path.join(self.toolchain_dir(), "sysroot"))

    def sysroot_lib_dir(self, target):
        return _require(
            os.path.join(self.toolchain_dir(), "sysroot", "usr", "lib", target.ndk_triple)
        )

    def sysroot_platform_lib_dir(self, target, min_api):
        """Find the per-API library directory to link against.

        Prefer the newest platform that is not newer than ``min_api``
        (scanning down to ``MIN_PLATFORM``); when the NDK dropped every
        platform that old, use the oldest one above ``min_api`` (scanning up
        to ``MAX_PLATFORM``).
        """
        lib_dir = self.sysroot_lib_dir(target)

        for platform in range(min_api, MIN_PLATFORM - 1, -1):
            path = os.path.join(lib_dir, str(platform))
            if os.path.exists(path):
                return path

        for platform in range(max(min_api + 1, MIN_PLATFORM), MAX_PLATFORM):
            path = os.path.join(lib_dir, str(platform))
            if os.path.exists(path):
                logger.warning(f"API {min_api} is not provided by this NDK, linking against API {platform}")
                return path

        logger.error(f"Error: No platform library directory for API {min_api} in {lib_dir}")
        raise PlatformNotFound(min_api)

    def build_environment(self, descriptor, base_env=None):
        """Environment for driving a configure/make style cross build."""
        target, api = descriptor.target, descriptor.min_api
        logger.info(f"  - Setting up build environment for {descriptor}...")

        bin_dir = self.bin_dir()
        sysroot = self.sysroot()
        cc, cxx = self.clang(target, api)
        platform_lib_dir = self.sysroot_platform_lib_dir(target, api)

        env = dict(os.environ if base_env is None else base_env)
        env["CC"] = cc
        env["CXX"] = cxx
        env["AR"] = self.llvm_tool("ar")
        env["RANLIB"] = self.llvm_tool("ranlib")
        env["STRIP"] = self.llvm_tool("strip")
        env["READELF"] = self.llvm_tool("readelf")
        env["SYSROOT"] = sysroot
        env["CFLAGS"] = f"-fPIC -DANDROID -D__ANDROID_API__={api} --sysroot={sysroot}"
        env["LDFLAGS"] = f"-L{platform_lib_dir} --sysroot={sysroot}"
        env["PATH"] = os.pathsep.join(p for p in (bin_dir, env.get("PATH")) if p)
        return env
