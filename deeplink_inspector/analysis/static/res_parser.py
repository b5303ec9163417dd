from pathlib import Path
from typing import Dict

from lxml import etree

from deeplink_inspector.reports.models import StringTable, freeze_string_table
from deeplink_inspector.utils.fs_utils import read_input_bytes
from deeplink_inspector.utils.logger import get_logger

logger = get_logger()

STRINGS_ROOT_TAG = "resources"


def _secure_parser() -> etree.XMLParser:
    # recover keeps the entries that parsed before a broken one
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False, recover=True)


def _element_chardata(elem: etree._Element) -> str:
    # Direct character data only: markup children (<b>, <xliff:g>) are dropped, their tails kept
    parts = [elem.text or ""]
    parts.extend(child.tail or "" for child in elem)
    return "".join(parts)


def parse_string_table(content: bytes) -> StringTable:
    """
    Build the name → value table from the bytes of a strings.xml file.

    Entries without a name are ignored and a duplicated name keeps the value
    of its last declaration. Malformed markup is recovered where possible:
    broken entries are dropped and the well-formed ones are kept. Content
    with nothing recoverable, or whose root is not <resources>, yields an
    empty table so placeholders stay unresolved instead of failing the run.
    """
    entries: Dict[str, str] = {}
    parser = _secure_parser()

    try:
        root = etree.fromstring(content, parser=parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.warning(f"[STRINGS] strings.xml is not well-formed, no placeholders will resolve: {e}")
        return freeze_string_table(entries)

    if root is None:
        logger.warning("[STRINGS] strings.xml has no recoverable content, no placeholders will resolve")
        return freeze_string_table(entries)

    if len(parser.error_log):
        logger.warning(f"[STRINGS] strings.xml is not well-formed, keeping recoverable entries: {parser.error_log[0].message}")

    if etree.QName(root).localname != STRINGS_ROOT_TAG:
        logger.warning(f"[STRINGS] Unexpected root <{root.tag}> in strings.xml, expected <{STRINGS_ROOT_TAG}>")
        return freeze_string_table(entries)

    for string_tag in root.iterchildren("string"):
        name = string_tag.get("name")
        if not name:
            logger.debug("[STRINGS] Skipping <string> without a name attribute")
            continue
        if name in entries:
            logger.debug(f"[STRINGS] Duplicate string '{name}', keeping the last declaration")
        entries[name] = _element_chardata(string_tag)

    logger.debug(f"[STRINGS] Loaded {len(entries)} string resource(s)")
    return freeze_string_table(entries)


def load_string_table(strings_path: Path) -> StringTable:
    content = read_input_bytes(strings_path, stage="strings-read", label="strings")
    return parse_string_table(content)
