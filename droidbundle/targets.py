from collections import namedtuple
from enum import Enum

from .exceptions import UnsupportedTarget

# abi -> (ndk triple, clang triple, rust triple)
ARCH_MAP = {
    "armeabi-v7a": ("arm-linux-androideabi", "armv7a-linux-androideabi", "armv7-linux-androideabi"),
    "arm64-v8a": ("aarch64-linux-android", "aarch64-linux-android", "aarch64-linux-android"),
    "x86": ("i686-linux-android", "i686-linux-android", "i686-linux-android"),
    "x86_64": ("x86_64-linux-android", "x86_64-linux-android", "x86_64-linux-android"),
}


class AndroidTarget(Enum):
    ARMV7_LINUX_ANDROIDEABI = "armeabi-v7a"
    AARCH64_LINUX_ANDROID = "arm64-v8a"
    I686_LINUX_ANDROID = "x86"
    X86_64_LINUX_ANDROID = "x86_64"

    @property
    def android_abi(self):
        return self.value

    @property
    def ndk_triple(self):
        """Triple used for sysroot library directories and binutils names."""
        return ARCH_MAP[self.value][0]

    @property
    def ndk_llvm_triple(self):
        """Prefix of the API-level specific clang wrappers."""
        return ARCH_MAP[self.value][1]

    @property
    def rust_triple(self):
        return ARCH_MAP[self.value][2]

    @classmethod
    def parse(cls, name):
        """Accept an ABI name (``arm64-v8a``) or a rust triple."""
        if isinstance(name, cls):
            return name
        for target in cls:
            if name in (target.value, target.rust_triple):
                return target
        raise UnsupportedTarget(name)


class TargetDescriptor(namedtuple("TargetDescriptor", ["target", "min_api"])):
    """An Android target plus the minimum API level it has to run on."""

    __slots__ = ()

    def __new__(cls, target, min_api):
        return super().__new__(cls, AndroidTarget.parse(target), int(min_api))

    def __str__(self):
        return f"{self.target.android_abi} (API {self.min_api})"
