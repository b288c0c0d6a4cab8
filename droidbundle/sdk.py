import os
import re

from .cli_logger import logger
from .exceptions import AndroidSdkNotFound, BuildToolsNotFound, PathNotFound
from .ndk import host_tag

SDK_ENV_VARS = ("ANDROID_SDK_ROOT", "ANDROID_HOME")


def _version_key(version):
    # "34.0.0-rc3" sorts below "34.0.0"
    numbers = [int(n) for n in re.findall(r"\d+", version.split("-")[0])]
    return numbers, "-" not in version


class AndroidSdk:
    """An installed Android SDK, used to locate the packaging tools."""

    def __init__(self, sdk_path):
        self.sdk_path = sdk_path

    def __repr__(self):
        return f"AndroidSdk({self.sdk_path!r})"

    @classmethod
    def from_env(cls, sdk_path=None):
        if sdk_path:
            if not os.path.exists(sdk_path):
                raise PathNotFound(sdk_path)
            return cls(sdk_path)
        for var in SDK_ENV_VARS:
            value = os.environ.get(var)
            if value:
                logger.info(f"Using Android SDK from ${var}: {value}")
                return cls(value)
        logger.error("Error: Android SDK not found.")
        raise AndroidSdkNotFound()

    def build_tools_versions(self):
        """Installed build-tools versions, newest first."""
        build_tools = os.path.join(self.sdk_path, "build-tools")
        if not os.path.isdir(build_tools):
            return []
        versions = [
            d for d in os.listdir(build_tools)
            if os.path.isdir(os.path.join(build_tools, d))
        ]
        return sorted(versions, key=_version_key, reverse=True)

    def build_tool(self, name, version=None):
        """Path to ``build-tools/<version>/<name>``, newest version by default."""
        if version is None:
            versions = self.build_tools_versions()
            if not versions:
                raise BuildToolsNotFound(self.sdk_path)
            version = versions[0]
        suffix = ".exe" if host_tag() == "windows" else ""
        path = os.path.join(self.sdk_path, "build-tools", version, f"{name}{suffix}")
        if not os.path.exists(path):
            raise PathNotFound(path)
        return path

    def aapt2(self, version=None):
        return self.build_tool("aapt2", version)

    def platform_jar(self, api):
        path = os.path.join(self.sdk_path, "platforms", f"android-{api}", "android.jar")
        if not os.path.exists(path):
            raise PathNotFound(path)
        return path
