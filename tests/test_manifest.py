import unittest
import xml.etree.ElementTree as ET

from droidbundle.config import DEFAULT_MIN_SDK_VERSION, DEFAULT_TARGET_SDK_VERSION
from droidbundle.manifest import (
    ANDROID_NS,
    AndroidManifest,
    Feature,
    IntentFilter,
    IntentFilterData,
    Permission,
    manifest_from_config,
)


def attr(name):
    return f"{{{ANDROID_NS}}}{name}"


class TestAndroidManifest(unittest.TestCase):

    def test_minimal_document(self):
        text = AndroidManifest(package="org.example.app").to_string()
        self.assertTrue(text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<manifest'))
        self.assertIn('xmlns:android="http://schemas.android.com/apk/res/android"', text)
        self.assertIn('package="org.example.app"', text)
        self.assertIn('android:name="android.app.NativeActivity"', text)
        self.assertIn('android:name="android.intent.action.MAIN"', text)

    def test_sdk_and_permissions(self):
        manifest = AndroidManifest(
            package="org.example.app",
            min_sdk_version=21,
            target_sdk_version=33,
            permissions=[Permission("android.permission.INTERNET"),
                         Permission("android.permission.WRITE_EXTERNAL_STORAGE", max_sdk_version=18)],
            features=[Feature("android.hardware.camera", required=False)],
            opengles_version=(3, 1),
        )
        root = ET.fromstring(manifest.to_string().split("\n", 1)[1])

        uses_sdk = root.find("uses-sdk")
        self.assertEqual(uses_sdk.get(attr("minSdkVersion")), "21")
        self.assertEqual(uses_sdk.get(attr("targetSdkVersion")), "33")
        permissions = root.findall("uses-permission")
        self.assertEqual(len(permissions), 2)
        self.assertEqual(permissions[1].get(attr("maxSdkVersion")), "18")
        features = root.findall("uses-feature")
        self.assertEqual(features[0].get(attr("glEsVersion")), "0x00030001")
        self.assertEqual(features[1].get(attr("required")), "false")

    def test_intent_filters_and_lib_name(self):
        manifest = AndroidManifest(
            package="org.example.app",
            lib_name="main",
            intent_filters=[IntentFilter(
                name="android.intent.action.VIEW",
                categories=("android.intent.category.BROWSABLE",),
                data=(IntentFilterData(scheme="https", host="example.org", prefix="/app"),),
            )],
        )
        activity = manifest.to_element().find("application/activity")
        meta = activity.find("meta-data")
        self.assertEqual(meta.get(attr("value")), "main")
        filters = activity.findall("intent-filter")
        self.assertEqual(len(filters), 2)
        data = filters[1].find("data")
        self.assertEqual(data.get(attr("pathPrefix")), "/app")

    def test_str_is_document(self):
        manifest = AndroidManifest(package="org.example.app")
        self.assertEqual(str(manifest), manifest.to_string())


class TestManifestFromConfig(unittest.TestCase):

    def test_defaults(self):
        manifest = manifest_from_config({"app": {"name": "My Game"}})
        self.assertEqual(manifest.package, "org.droidbundle.my_game")
        self.assertEqual(manifest.label, "My Game")
        self.assertTrue(manifest.debuggable)
        self.assertEqual(manifest.min_sdk_version, DEFAULT_MIN_SDK_VERSION)
        self.assertEqual(manifest.target_sdk_version, DEFAULT_TARGET_SDK_VERSION)
        self.assertIn('android:minSdkVersion="21"', manifest.to_string())

    def test_full_config(self):
        conf = {
            "app": {"name": "demo", "package": "com.example.demo", "version_code": "3",
                    "version_name": "0.3", "build_type": "release"},
            "android": {
                "min_sdk_version": 24,
                "fullscreen": True,
                "feature": [{"name": "android.hardware.vulkan.level"}],
                "permission": [{"name": "android.permission.INTERNET"}],
                "intent_filter": [{
                    "name": "android.intent.action.VIEW",
                    "data": [{"scheme": "https"}, {"host": "example.org"}],
                }],
                "application_metadatas": [{"name": "com.example.flag", "value": 1}],
            },
        }
        manifest = manifest_from_config(conf)
        self.assertEqual(manifest.package, "com.example.demo")
        self.assertEqual(manifest.version_code, 3)
        self.assertFalse(manifest.debuggable)
        self.assertTrue(manifest.fullscreen)
        self.assertEqual(manifest.features, [Feature("android.hardware.vulkan.level", True)])
        self.assertEqual(manifest.intent_filters[0].data[0].host, "example.org")
        self.assertEqual(manifest.application_metadatas[0].value, "1")


if __name__ == '__main__':
    unittest.main()
