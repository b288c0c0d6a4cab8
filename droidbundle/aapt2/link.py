from dataclasses import dataclass
from typing import Optional, Tuple

from .base import Aapt2Command, flag, option, repeated


@dataclass(frozen=True)
class Aapt2Link(Aapt2Command):
    """Merge compiled intermediates and a manifest into a resource package."""

    stage = "link"

    inputs: Tuple[str, ...] = ()
    output_apk: str = ""
    manifest: str = ""
    include: Tuple[str, ...] = ()
    assets: Tuple[str, ...] = ()
    min_sdk_version: Optional[int] = None
    target_sdk_version: Optional[int] = None
    version_code: Optional[int] = None
    version_name: Optional[str] = None
    java: Optional[str] = None
    extra_packages: Tuple[str, ...] = ()
    proto_format: bool = False
    auto_add_overlay: bool = False
    verbose: bool = False

    def __post_init__(self):
        for name in ("inputs", "include", "assets", "extra_packages"):
            object.__setattr__(self, name, tuple(str(v) for v in getattr(self, name)))

    def android_jar(self, path):
        """Add a package (usually the platform ``android.jar``) to link against."""
        return self._with(include=self.include + (str(path),))

    def asset_dir(self, path):
        return self._with(assets=self.assets + (str(path),))

    def sdk_versions(self, min_sdk_version=None, target_sdk_version=None):
        return self._with(min_sdk_version=min_sdk_version, target_sdk_version=target_sdk_version)

    def app_version(self, version_code=None, version_name=None):
        return self._with(version_code=version_code, version_name=version_name)

    def java_dir(self, path, extra_packages=()):
        """Generate ``R.java`` into ``path``."""
        return self._with(java=path, extra_packages=tuple(extra_packages))

    def with_proto_format(self, enabled=True):
        return self._with(proto_format=enabled)

    def with_auto_add_overlay(self, enabled=True):
        return self._with(auto_add_overlay=enabled)

    def with_verbose(self, enabled=True):
        return self._with(verbose=enabled)

    def stage_args(self):
        args = ["-o", str(self.output_apk), "--manifest", str(self.manifest)]
        repeated(args, self.include, "-I")
        repeated(args, self.assets, "-A")
        option(args, self.min_sdk_version, "--min-sdk-version")
        option(args, self.target_sdk_version, "--target-sdk-version")
        option(args, self.version_code, "--version-code")
        option(args, self.version_name, "--version-name")
        option(args, self.java, "--java")
        if self.extra_packages:
            args.extend(["--extra-packages", ":".join(self.extra_packages)])
        flag(args, self.proto_format, "--proto-format")
        flag(args, self.auto_add_overlay, "--auto-add-overlay")
        flag(args, self.verbose, "-v")
        args.extend(self.inputs)
        return args
