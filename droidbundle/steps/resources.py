import os

from ..aapt2 import Aapt2
from ..cli_logger import logger
from ..utils.file_manager import clean_dir, collect_files, ensure_dir
from .base import CompiledResources, ExecutionUnit, GeneratedManifest, NoDeps, ResourcePackage


class CompileResources(ExecutionUnit):
    """Compile every resource file on its own into ``out_dir``.

    ``executor`` is an :class:`~droidbundle.aapt2.Aapt2Runner` (one process
    per file) or an open :class:`~droidbundle.aapt2.DaemonSession`.
    Directories among ``inputs`` are expanded to the files below them.

    ``out_dir`` belongs to this unit: it is emptied before compiling, so the
    result only lists intermediates of the current inputs. When run after
    :class:`~droidbundle.steps.GenAndroidManifest` the manifest path is
    handed on to the link step.
    """

    requires = (NoDeps, GeneratedManifest)
    produces = CompiledResources

    def __init__(self, executor, inputs, out_dir, options=None):
        self.executor = executor
        self.inputs = list(inputs)
        self.out_dir = out_dir
        self.options = options

    def resource_files(self):
        files = []
        for path in self.inputs:
            if os.path.isdir(path):
                files.extend(f for f in collect_files(path) if not os.path.basename(f).startswith("."))
            else:
                files.append(path)
        return files

    def run(self, deps=None):
        clean_dir(self.out_dir)
        files = self.resource_files()
        logger.info(f"  - Compiling {len(files)} resource file(s) into {self.out_dir}")
        for path in files:
            command = Aapt2.compile([path], self.out_dir)
            if self.options is not None:
                command = self.options(command)
            self.executor.run(command)
        manifest = deps.path if deps is not None else None
        return CompiledResources(tuple(collect_files(self.out_dir, ".flat")), manifest)


class LinkResources(ExecutionUnit):
    """Link compiled resources and a manifest into ``output_apk``.

    With ``manifest_path`` left as ``None`` the manifest generated upstream
    (carried in :class:`CompiledResources`) is linked.
    """

    requires = CompiledResources
    produces = ResourcePackage

    def __init__(self, executor, manifest_path, output_apk, android_jar=None, assets_dir=None,
                 min_sdk_version=None, target_sdk_version=None, version_code=None, version_name=None):
        self.executor = executor
        self.manifest_path = manifest_path
        self.output_apk = output_apk
        self.android_jar = android_jar
        self.assets_dir = assets_dir
        self.min_sdk_version = min_sdk_version
        self.target_sdk_version = target_sdk_version
        self.version_code = version_code
        self.version_name = version_name

    def command(self, compiled):
        manifest = self.manifest_path or compiled.manifest
        if not manifest:
            raise ValueError("LinkResources needs a manifest_path or an upstream GenAndroidManifest")
        command = Aapt2.link(compiled.files, self.output_apk, manifest)
        if self.android_jar:
            command = command.android_jar(self.android_jar)
        if self.assets_dir and os.path.isdir(self.assets_dir):
            command = command.asset_dir(self.assets_dir)
        if self.min_sdk_version is not None or self.target_sdk_version is not None:
            command = command.sdk_versions(self.min_sdk_version, self.target_sdk_version)
        if self.version_code is not None or self.version_name is not None:
            command = command.app_version(self.version_code, self.version_name)
        return command

    def run(self, deps=None):
        command = self.command(deps)
        output_dir = os.path.dirname(self.output_apk)
        if output_dir:
            ensure_dir(output_dir)
        logger.info(f"  - Linking {len(deps.files)} compiled resource(s) into {self.output_apk}")
        self.executor.run(command)
        logger.success(f"  - Resource package written to {self.output_apk}")
        return ResourcePackage(self.output_apk)
