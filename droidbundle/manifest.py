import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import android_settings

ANDROID_NS = "http://schemas.android.com/apk/res/android"
ET.register_namespace("android", ANDROID_NS)

FULLSCREEN_THEME = "@android:style/Theme.DeviceDefault.NoActionBar.Fullscreen"
NATIVE_ACTIVITY = "android.app.NativeActivity"


def _a(name):
    return f"{{{ANDROID_NS}}}{name}"


def _bool(value):
    return "true" if value else "false"


@dataclass(frozen=True)
class Feature:
    name: str
    required: bool = True


@dataclass(frozen=True)
class Permission:
    name: str
    max_sdk_version: Optional[int] = None


@dataclass(frozen=True)
class IntentFilterData:
    scheme: Optional[str] = None
    host: Optional[str] = None
    prefix: Optional[str] = None


@dataclass(frozen=True)
class IntentFilter:
    name: str
    data: Tuple[IntentFilterData, ...] = ()
    categories: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MetaData:
    name: str
    value: str


@dataclass
class AndroidManifest:
    package: str
    version_code: int = 1
    version_name: str = "1.0"
    min_sdk_version: Optional[int] = None
    target_sdk_version: Optional[int] = None
    label: Optional[str] = None
    icon: Optional[str] = None
    debuggable: bool = False
    fullscreen: bool = False
    orientation: Optional[str] = None
    opengles_version: Optional[Tuple[int, int]] = None
    activity_name: str = NATIVE_ACTIVITY
    lib_name: Optional[str] = None
    features: List[Feature] = field(default_factory=list)
    permissions: List[Permission] = field(default_factory=list)
    intent_filters: List[IntentFilter] = field(default_factory=list)
    application_metadatas: List[MetaData] = field(default_factory=list)
    activity_metadatas: List[MetaData] = field(default_factory=list)

    def to_element(self):
        root = ET.Element("manifest", {
            "package": self.package,
            _a("versionCode"): str(self.version_code),
            _a("versionName"): self.version_name,
        })

        sdk = {}
        if self.min_sdk_version is not None:
            sdk[_a("minSdkVersion")] = str(self.min_sdk_version)
        if self.target_sdk_version is not None:
            sdk[_a("targetSdkVersion")] = str(self.target_sdk_version)
        if sdk:
            ET.SubElement(root, "uses-sdk", sdk)

        if self.opengles_version is not None:
            major, minor = self.opengles_version
            ET.SubElement(root, "uses-feature", {
                _a("glEsVersion"): f"0x{major:04x}{minor:04x}",
                _a("required"): "true",
            })
        for feature in self.features:
            ET.SubElement(root, "uses-feature", {
                _a("name"): feature.name,
                _a("required"): _bool(feature.required),
            })
        for permission in self.permissions:
            attrs = {_a("name"): permission.name}
            if permission.max_sdk_version is not None:
                attrs[_a("maxSdkVersion")] = str(permission.max_sdk_version)
            ET.SubElement(root, "uses-permission", attrs)

        app_attrs = {_a("hasCode"): "false", _a("debuggable"): _bool(self.debuggable)}
        if self.label is not None:
            app_attrs[_a("label")] = self.label
        if self.icon is not None:
            app_attrs[_a("icon")] = self.icon
        if self.fullscreen:
            app_attrs[_a("theme")] = FULLSCREEN_THEME
        application = ET.SubElement(root, "application", app_attrs)
        for meta in self.application_metadatas:
            ET.SubElement(application, "meta-data", {_a("name"): meta.name, _a("value"): meta.value})

        activity_attrs = {
            _a("name"): self.activity_name,
            _a("configChanges"): "orientation|keyboardHidden|screenSize",
            _a("exported"): "true",
        }
        if self.orientation is not None:
            activity_attrs[_a("screenOrientation")] = self.orientation
        activity = ET.SubElement(application, "activity", activity_attrs)
        if self.lib_name is not None:
            ET.SubElement(activity, "meta-data", {_a("name"): "android.app.lib_name", _a("value"): self.lib_name})
        for meta in self.activity_metadatas:
            ET.SubElement(activity, "meta-data", {_a("name"): meta.name, _a("value"): meta.value})

        launcher = ET.SubElement(activity, "intent-filter")
        ET.SubElement(launcher, "action", {_a("name"): "android.intent.action.MAIN"})
        ET.SubElement(launcher, "category", {_a("name"): "android.intent.category.LAUNCHER"})
        for intent_filter in self.intent_filters:
            element = ET.SubElement(activity, "intent-filter")
            ET.SubElement(element, "action", {_a("name"): intent_filter.name})
            for category in intent_filter.categories:
                ET.SubElement(element, "category", {_a("name"): category})
            for data in intent_filter.data:
                attrs = {}
                if data.scheme is not None:
                    attrs[_a("scheme")] = data.scheme
                if data.host is not None:
                    attrs[_a("host")] = data.host
                if data.prefix is not None:
                    attrs[_a("pathPrefix")] = data.prefix
                ET.SubElement(element, "data", attrs)
        return root

    def to_string(self):
        root = self.to_element()
        ET.indent(root, space="    ")
        return '<?xml version="1.0" encoding="utf-8"?>\n' + ET.tostring(root, encoding="unicode")

    def __str__(self):
        return self.to_string()


def _package_name(app_name):
    return "org.droidbundle." + re.sub(r"[^a-z0-9_]", "_", app_name.lower())


def manifest_from_config(conf):
    """Build an :class:`AndroidManifest` from a loaded droidbundle.toml.

    SDK levels fall back to the same defaults the link step uses.
    """
    app = conf.get("app", {})
    android = android_settings(conf)
    name = app.get("name", "app")

    opengles = android.get("opengles_version")
    intent_filters = []
    for entry in android.get("intent_filter", []):
        data = [
            IntentFilterData(scheme=d.get("scheme"), host=d.get("host"), prefix=d.get("prefix"))
            for d in entry.get("data", [])
        ]
        intent_filters.append(IntentFilter(
            name=entry["name"],
            data=tuple(reversed(data)),
            categories=tuple(entry.get("categories", [])),
        ))

    return AndroidManifest(
        package=app.get("package") or _package_name(name),
        version_code=int(app.get("version_code", 1)),
        version_name=str(app.get("version_name", "1.0")),
        min_sdk_version=android.get("min_sdk_version"),
        target_sdk_version=android.get("target_sdk_version"),
        label=android.get("apk_label", name),
        icon=android.get("icon"),
        debuggable=app.get("build_type", "debug") == "debug",
        fullscreen=bool(android.get("fullscreen", False)),
        orientation=android.get("orientation"),
        opengles_version=tuple(opengles) if opengles else None,
        lib_name=android.get("lib_name"),
        features=[
            Feature(name=f["name"], required=f.get("required", True))
            for f in android.get("feature", [])
        ],
        permissions=[
            Permission(name=p["name"], max_sdk_version=p.get("max_sdk_version"))
            for p in android.get("permission", [])
        ],
        intent_filters=intent_filters,
        application_metadatas=[
            MetaData(name=m["name"], value=str(m["value"]))
            for m in android.get("application_metadatas", [])
        ],
        activity_metadatas=[
            MetaData(name=m["name"], value=str(m["value"]))
            for m in android.get("activity_metadatas", [])
        ],
    )
