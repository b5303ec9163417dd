import pytest
from deeplink_inspector.analysis.static.static_runner import run_static_analysis
from deeplink_inspector.core.errors import InputReadError, ManifestParseError
from pathlib import Path

SAMPLE_DIR = Path(__file__).parent / "sample" / "decompiled"

STRINGS_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_scheme">myapp</string>
</resources>"""

MANIFEST_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android" package="com.example">
    <application>
        <activity android:name="com.example.DeepActivity"{exported}>
            <intent-filter>
                <action android:name="android.intent.action.VIEW"/>
                <data {data}/>
            </intent-filter>
        </activity>
    </application>
</manifest>"""

DEEPLINK_DATA = 'android:scheme="@string/app_scheme" android:host="open" android:pathPrefix="item"'


def write_inputs(tmp_path: Path, exported: str = ' android:exported="true"', data: str = DEEPLINK_DATA):
    manifest = tmp_path / "AndroidManifest.xml"
    strings = tmp_path / "strings.xml"
    manifest.write_text(MANIFEST_TEMPLATE.format(exported=exported, data=data), encoding="utf-8")
    strings.write_text(STRINGS_XML, encoding="utf-8")
    return manifest, strings


def test_resolved_placeholder_builds_deeplink(tmp_path):
    manifest, strings = write_inputs(tmp_path)
    report = run_static_analysis(manifest, strings)

    assert [c.as_tuple() for c in report.activities] == [
        ("com.example.DeepActivity", True, ["android.intent.action.VIEW"], ["myapp://open/item"])
    ]
    assert report.aliases == report.services == report.receivers == []
    assert report.package_name == "com.example"


def test_component_without_exported_attribute_is_excluded(tmp_path):
    manifest, strings = write_inputs(tmp_path, exported="")
    report = run_static_analysis(manifest, strings)
    assert all(not group for group in report.categories().values())


def test_mime_only_data_emits_actions_but_no_uri(tmp_path):
    manifest, strings = write_inputs(tmp_path, data='android:mimeType="text/plain"')
    report = run_static_analysis(manifest, strings)

    component = report.activities[0]
    assert component.actions == ["android.intent.action.VIEW"]
    assert component.uris == []


def test_unreadable_manifest_is_fatal(tmp_path):
    _, strings = write_inputs(tmp_path)
    with pytest.raises(InputReadError) as excinfo:
        run_static_analysis(tmp_path / "nope" / "AndroidManifest.xml", strings)
    assert excinfo.value.stage == "manifest-read"


def test_unreadable_strings_is_fatal(tmp_path):
    manifest, _ = write_inputs(tmp_path)
    with pytest.raises(InputReadError) as excinfo:
        run_static_analysis(manifest, tmp_path / "missing.xml")
    assert excinfo.value.stage == "strings-read"


def test_placeholder_that_breaks_markup_is_a_parse_error(tmp_path):
    manifest, strings = write_inputs(tmp_path)
    strings.write_text('<resources><string name="app_scheme">a"b</string></resources>', encoding="utf-8")
    with pytest.raises(ManifestParseError):
        run_static_analysis(manifest, strings)


def test_sample_decompiled_tree():
    report = run_static_analysis(SAMPLE_DIR / "AndroidManifest.xml", SAMPLE_DIR / "res" / "values" / "strings.xml")

    assert report.package_name == "com.example.shop"
    assert [c.name for c in report.activities] == [
        "com.example.shop.MainActivity",
        "com.example.shop.DeepLinkActivity",
    ]
    deep = report.activities[1]
    assert deep.actions == ["android.intent.action.VIEW", "android.intent.action.SEND"]
    assert deep.uris == ["myapp://open/item", "https://shop.example.com/cart"]

    assert [c.as_tuple() for c in report.aliases] == [
        ("com.example.shop.Launcher", True, ["android.intent.action.VIEW"], ["shop:///.*/promo"])
    ]
    assert [c.name for c in report.services] == ["com.example.shop.PushService"]
    assert [c.name for c in report.receivers] == ["com.example.shop.BootReceiver"]
