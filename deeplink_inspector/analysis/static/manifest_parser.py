from pathlib import Path
from typing import List, Optional

from lxml import etree

from deeplink_inspector.config.defaults import ANDROID_NS, COMPONENT_CATEGORIES
from deeplink_inspector.core.errors import ManifestParseError
from deeplink_inspector.reports.models import Component, DataRule, IntentFilter, ManifestDocument
from deeplink_inspector.utils.fs_utils import read_input_bytes
from deeplink_inspector.utils.logger import get_logger

logger = get_logger()

MANIFEST_ROOT_TAG = "manifest"

DATA_RULE_ATTRIBUTES = {
    "scheme": "scheme",
    "host": "host",
    "port": "port",
    "path": "path",
    "path_prefix": "pathPrefix",
    "path_pattern": "pathPattern",
}


def get_android_attrib(elem: etree._Element, name: str) -> Optional[str]:
    """
    Look up an attribute by local name: `android:<name>` first, then a bare
    `<name>`, then the same local name under any other namespace prefix.
    Returns None when the attribute is not declared.
    """
    value = elem.get(f"{{{ANDROID_NS}}}{name}")
    if value is not None:
        return value
    value = elem.get(name)
    if value is not None:
        return value
    for key, val in elem.attrib.items():
        if etree.QName(key).localname == name:
            return val
    return None


def _present(value: Optional[str]) -> Optional[str]:
    return value if value else None


def extract_data_rule(data: etree._Element) -> DataRule:
    return DataRule(**{
        field_name: _present(get_android_attrib(data, attr))
        for field_name, attr in DATA_RULE_ATTRIBUTES.items()
    })


def extract_intent_filter(intent: etree._Element) -> IntentFilter:
    return IntentFilter(
        # Empty action names are kept; hiding them is up to the reporter
        actions=[get_android_attrib(a, "name") or "" for a in intent.iterchildren("action")],
        data_rules=[extract_data_rule(d) for d in intent.iterchildren("data")],
    )


def extract_component(elem: etree._Element) -> Component:
    return Component(
        name=get_android_attrib(elem, "name") or "",
        exported_raw=get_android_attrib(elem, "exported"),
        filters=[extract_intent_filter(i) for i in elem.iterchildren("intent-filter")],
    )


def extract_components(root: etree._Element, tag_name: str) -> List[Component]:
    return [
        extract_component(elem)
        for application in root.iterchildren("application")
        for elem in application.iterchildren(tag_name)
    ]


def parse_manifest(manifest_text: str) -> ManifestDocument:
    """
    Parse resolved manifest text into its declared components.

    Raises:
        ManifestParseError: the text is not well-formed XML or its root is
        not <manifest>. Missing attributes never raise.
    """
    # Text is re-encoded here, so any declared encoding is overridden
    parser = etree.XMLParser(resolve_entities=False, no_network=True, encoding="utf-8")
    try:
        root = etree.fromstring(manifest_text.encode("utf-8"), parser=parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ManifestParseError(f"Error parsing manifest: {e}") from e

    root_name = etree.QName(root).localname
    if root_name != MANIFEST_ROOT_TAG:
        raise ManifestParseError(f"Error parsing manifest: expected <{MANIFEST_ROOT_TAG}> root, found <{root_name}>")

    components = {
        category: extract_components(root, tag_name)
        for category, tag_name in COMPONENT_CATEGORIES.items()
    }
    logger.debug(
        "[MANIFEST] Parsed " + ", ".join(f"{len(v)} {k}" for k, v in components.items())
    )

    return ManifestDocument(package_name=root.get("package", ""), **components)


def load_manifest_text(manifest_path: Path) -> str:
    content = read_input_bytes(manifest_path, stage="manifest-read", label="manifest")
    return content.decode("utf-8-sig", errors="replace")
