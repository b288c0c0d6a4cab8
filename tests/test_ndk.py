import os
import tempfile
import unittest
from unittest.mock import patch

from droidbundle import ndk as ndk_module
from droidbundle.exceptions import (
    AndroidNdkNotFound,
    PathNotFound,
    PlatformNotFound,
    UnsupportedHost,
    UnsupportedTarget,
)
from droidbundle.ndk import AndroidNdk, host_tag
from droidbundle.targets import AndroidTarget, TargetDescriptor

LINUX_HOST = {"HOST": "x86_64-unknown-linux-gnu"}
AARCH64 = AndroidTarget.AARCH64_LINUX_ANDROID
ARMV7 = AndroidTarget.ARMV7_LINUX_ANDROIDEABI


def touch(path):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write("")
    return path


def make_toolchain(root, dirname="linux-x86_64"):
    toolchain = os.path.join(root, "toolchains", "llvm", "prebuilt", dirname)
    os.makedirs(os.path.join(toolchain, "bin"), exist_ok=True)
    return toolchain


class TestHostTag(unittest.TestCase):

    def test_host_variable_wins_over_platform(self):
        self.assertEqual(host_tag(host="aarch64-apple-macos", platform="linux"), "darwin")
        self.assertEqual(host_tag(host="x86_64-pc-windows-msvc", platform="linux"), "windows")

    def test_falls_back_to_platform(self):
        self.assertEqual(host_tag(host="", platform="linux"), "linux")
        self.assertEqual(host_tag(host="", platform="darwin"), "darwin")
        self.assertEqual(host_tag(host="", platform="win32"), "windows")

    def test_unknown_host_string(self):
        with self.assertRaises(UnsupportedHost) as ctx:
            host_tag(host="sparc-sun-solaris", platform="sunos5")
        self.assertEqual(ctx.exception.host, "sparc-sun-solaris")

    def test_no_host_information(self):
        with self.assertRaises(UnsupportedTarget):
            host_tag(host="", platform="sunos5")


class TestLocateInstallation(unittest.TestCase):

    def test_env_priority(self):
        env = {"ANDROID_NDK_HOME": "/ndk/home", "ANDROID_NDK_PATH": "/ndk/path", "NDK_HOME": "/ndk/other"}
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(AndroidNdk.from_env().ndk_path, "/ndk/path")

    def test_root_variable_first(self):
        env = {"ANDROID_NDK_ROOT": "/ndk/root", "ANDROID_NDK_PATH": "/ndk/path"}
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(AndroidNdk.from_env("/sdk").ndk_path, "/ndk/root")

    def test_sdk_bundle_fallback(self):
        with tempfile.TemporaryDirectory() as sdk:
            os.makedirs(os.path.join(sdk, "ndk-bundle"))
            with patch.dict(os.environ, {}, clear=True):
                self.assertEqual(AndroidNdk.from_env(sdk).ndk_path, os.path.join(sdk, "ndk-bundle"))

    def test_not_found(self):
        with tempfile.TemporaryDirectory() as sdk:
            with patch.dict(os.environ, {}, clear=True):
                with self.assertRaises(AndroidNdkNotFound):
                    AndroidNdk.from_env(sdk)
                with self.assertRaises(AndroidNdkNotFound):
                    AndroidNdk.from_env()


class TestToolchainDir(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self.ndk = AndroidNdk(self.root)

    def tearDown(self):
        self._tmp.cleanup()

    def test_prefers_x86_64_suffix(self):
        expected = make_toolchain(self.root, "linux-x86_64")
        make_toolchain(self.root, "linux")
        with patch.dict(os.environ, LINUX_HOST):
            self.assertEqual(self.ndk.toolchain_dir(), expected)

    def test_bare_tag_fallback(self):
        expected = make_toolchain(self.root, "darwin")
        with patch.dict(os.environ, {"HOST": "aarch64-apple-macos"}):
            self.assertEqual(self.ndk.toolchain_dir(), expected)

    def test_missing_toolchain(self):
        with patch.dict(os.environ, LINUX_HOST):
            with self.assertRaises(PathNotFound) as ctx:
                self.ndk.toolchain_dir()
        self.assertEqual(
            ctx.exception.path,
            os.path.join(self.root, "toolchains", "llvm", "prebuilt", "linux"),
        )

    def test_unsupported_host(self):
        make_toolchain(self.root)
        with patch.dict(os.environ, {"HOST": "riscv64-unknown-haiku"}):
            with patch.object(ndk_module.sys, "platform", "haiku1"):
                with self.assertRaises(UnsupportedHost) as ctx:
                    self.ndk.toolchain_dir()
        self.assertEqual(ctx.exception.host, "riscv64-unknown-haiku")

    def test_unsupported_target_without_host(self):
        with patch.dict(os.environ, {}, clear=True):
            with patch.object(ndk_module.sys, "platform", "haiku1"):
                with self.assertRaises(UnsupportedTarget):
                    self.ndk.toolchain_dir()


class TestToolchainBinaries(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self.toolchain = make_toolchain(self.root)
        self.bin = os.path.join(self.toolchain, "bin")
        self.ndk = AndroidNdk(self.root)
        self.env = patch.dict(os.environ, LINUX_HOST)
        self.env.start()

    def tearDown(self):
        self.env.stop()
        self._tmp.cleanup()

    def test_clang_pair(self):
        cc = touch(os.path.join(self.bin, "armv7a-linux-androideabi21-clang"))
        cxx = touch(os.path.join(self.bin, "armv7a-linux-androideabi21-clang++"))
        self.assertEqual(self.ndk.clang(ARMV7, 21), (cc, cxx))

    def test_clang_missing_names_exact_path(self):
        with self.assertRaises(PathNotFound) as ctx:
            self.ndk.clang(AARCH64, 24)
        self.assertEqual(ctx.exception.path, os.path.join(self.bin, "aarch64-linux-android24-clang"))

    def test_clang_plus_plus_missing(self):
        touch(os.path.join(self.bin, "aarch64-linux-android24-clang"))
        with self.assertRaises(PathNotFound) as ctx:
            self.ndk.clang(AARCH64, 24)
        self.assertEqual(ctx.exception.path, os.path.join(self.bin, "aarch64-linux-android24-clang++"))

    def test_windows_clang_suffix(self):
        toolchain = make_toolchain(self.root, "windows-x86_64")
        bin_dir = os.path.join(toolchain, "bin")
        cc = touch(os.path.join(bin_dir, "aarch64-linux-android24-clang.cmd"))
        cxx = touch(os.path.join(bin_dir, "aarch64-linux-android24-clang++.cmd"))
        with patch.dict(os.environ, {"HOST": "x86_64-pc-windows-msvc"}):
            self.assertEqual(self.ndk.clang(AARCH64, 24), (cc, cxx))

    def test_named_binary_uses_ndk_triple(self):
        readelf = touch(os.path.join(self.bin, "arm-linux-androideabi-readelf"))
        self.assertEqual(self.ndk.toolchain_bin("readelf", ARMV7), readelf)
        self.assertEqual(self.ndk.readelf(ARMV7), [readelf])

    def test_named_binary_missing(self):
        with self.assertRaises(PathNotFound) as ctx:
            self.ndk.toolchain_bin("objdump", AARCH64)
        self.assertEqual(ctx.exception.path, os.path.join(self.bin, "aarch64-linux-android-objdump"))


class TestSysroot(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self.toolchain = make_toolchain(self.root)
        self.lib_dir = os.path.join(self.toolchain, "sysroot", "usr", "lib", "aarch64-linux-android")
        self.ndk = AndroidNdk(self.root)
        self.env = patch.dict(os.environ, LINUX_HOST)
        self.env.start()

    def tearDown(self):
        self.env.stop()
        self._tmp.cleanup()

    def test_sysroot_lib_dir_missing(self):
        with self.assertRaises(PathNotFound) as ctx:
            self.ndk.sysroot_lib_dir(AARCH64)
        self.assertEqual(ctx.exception.path, self.lib_dir)

    def test_exact_platform(self):
        for api in (21, 24, 30):
            os.makedirs(os.path.join(self.lib_dir, str(api)))
        self.assertEqual(self.ndk.sysroot_platform_lib_dir(AARCH64, 24), os.path.join(self.lib_dir, "24"))

    def test_closest_older_platform_first(self):
        for api in (21, 23, 26):
            os.makedirs(os.path.join(self.lib_dir, str(api)))
        self.assertEqual(self.ndk.sysroot_platform_lib_dir(AARCH64, 25), os.path.join(self.lib_dir, "23"))

    def test_newer_platform_when_nothing_older(self):
        for api in (26, 28):
            os.makedirs(os.path.join(self.lib_dir, str(api)))
        self.assertEqual(self.ndk.sysroot_platform_lib_dir(AARCH64, 19), os.path.join(self.lib_dir, "26"))

    def test_platform_not_found(self):
        os.makedirs(self.lib_dir)
        with self.assertRaises(PlatformNotFound) as ctx:
            self.ndk.sysroot_platform_lib_dir(AARCH64, 21)
        self.assertEqual(ctx.exception.min_api, 21)

    def test_beyond_upper_bound_is_ignored(self):
        os.makedirs(os.path.join(self.lib_dir, str(ndk_module.MAX_PLATFORM)))
        with self.assertRaises(PlatformNotFound):
            self.ndk.sysroot_platform_lib_dir(AARCH64, 21)

    def test_build_environment(self):
        bin_dir = os.path.join(self.toolchain, "bin")
        cc = touch(os.path.join(bin_dir, "aarch64-linux-android24-clang"))
        touch(os.path.join(bin_dir, "aarch64-linux-android24-clang++"))
        for tool in ("ar", "ranlib", "strip", "readelf"):
            touch(os.path.join(bin_dir, f"llvm-{tool}"))
        os.makedirs(os.path.join(self.lib_dir, "24"))

        env = self.ndk.build_environment(TargetDescriptor("arm64-v8a", 24), base_env={"PATH": "/usr/bin"})

        self.assertEqual(env["CC"], cc)
        self.assertEqual(env["AR"], os.path.join(bin_dir, "llvm-ar"))
        self.assertIn("-D__ANDROID_API__=24", env["CFLAGS"])
        self.assertIn(f"-L{os.path.join(self.lib_dir, '24')}", env["LDFLAGS"])
        self.assertEqual(env["PATH"], bin_dir + os.pathsep + "/usr/bin")


if __name__ == '__main__':
    unittest.main()
