"""Exception hierarchy for DroidBundle.

Configuration/environment problems (missing NDK or SDK, unsupported host)
are never retried: the user has to fix their machine. Filesystem problems
carry the exact path that was checked. Tool failures carry whatever the
tool printed.
"""

__all__ = [
    "DroidBundleError",
    "AndroidNdkNotFound",
    "AndroidSdkNotFound",
    "BuildToolsNotFound",
    "UnsupportedHost",
    "UnsupportedTarget",
    "PathNotFound",
    "PlatformNotFound",
    "CommandFailed",
    "IncompatibleUnits",
    "DaemonSessionError",
]


class DroidBundleError(Exception):
    """Base class for every error raised by droidbundle."""


class AndroidNdkNotFound(DroidBundleError):
    def __init__(self):
        super().__init__(
            "Android NDK was not found. Set ANDROID_NDK_ROOT (or ANDROID_NDK_PATH, "
            "ANDROID_NDK_HOME, NDK_HOME)."
        )


class AndroidSdkNotFound(DroidBundleError):
    def __init__(self):
        super().__init__("Android SDK was not found. Set ANDROID_SDK_ROOT or ANDROID_HOME.")


class BuildToolsNotFound(DroidBundleError):
    def __init__(self, sdk_path):
        self.sdk_path = sdk_path
        super().__init__(f"No build-tools installed in Android SDK at {sdk_path}")


class UnsupportedHost(DroidBundleError):
    def __init__(self, host):
        self.host = host
        super().__init__(f"Unsupported host: {host}")


class UnsupportedTarget(DroidBundleError):
    def __init__(self, target=None):
        self.target = target
        if target is None:
            super().__init__("Unsupported target: could not determine the host platform")
        else:
            super().__init__(f"Unsupported target: {target}")


class PathNotFound(DroidBundleError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Path {path} doesn't exist")


class PlatformNotFound(DroidBundleError):
    def __init__(self, min_api):
        self.min_api = min_api
        super().__init__(f"Android platform library directory for API {min_api} not found in the NDK")


class CommandFailed(DroidBundleError):
    """An external tool exited with a non-zero status.

    ``stdout`` and ``stderr`` hold the captured diagnostics so callers can
    show the user what the tool actually complained about.
    """

    def __init__(self, command, returncode, stdout="", stderr=""):
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"Command failed (Exit Code: {returncode}): {' '.join(str(c) for c in self.command)}"
        details = (self.stderr or self.stdout).strip()
        if details:
            message += f"\n{details}"
        super().__init__(message)


def shape_name(shape):
    """Readable name of a unit shape: a type or a tuple of accepted types."""
    if isinstance(shape, tuple):
        return " or ".join(shape_name(s) for s in shape)
    return shape.__name__


class IncompatibleUnits(DroidBundleError):
    """Two execution units were wired together with mismatching shapes."""

    def __init__(self, upstream, downstream):
        self.upstream = upstream
        self.downstream = downstream
        super().__init__(
            f"{type(upstream).__name__} produces {shape_name(upstream.produces)}, "
            f"but {type(downstream).__name__} requires {shape_name(downstream.requires)}"
        )


class DaemonSessionError(DroidBundleError):
    pass
