from .base import (
    CompiledResources,
    ExecutionUnit,
    GeneratedManifest,
    NativeLibrary,
    NoDeps,
    Pipeline,
    ResourcePackage,
    SharedLibraries,
    check_compatible,
)
from .manifest import GenAndroidManifest, MANIFEST_FILENAME
from .native import CompileNative, NeededLibraries
from .resources import CompileResources, LinkResources
