import re

from deeplink_inspector.config.defaults import STRING_PLACEHOLDER_PREFIX
from deeplink_inspector.reports.models import StringTable
from deeplink_inspector.utils.logger import get_logger

logger = get_logger()


def substitute_placeholders(raw_manifest: str, table: StringTable) -> str:
    """
    Replace every literal `@string/<name>` in the manifest text with its value.

    The rewrite is purely textual: it does not look at XML structure, so a
    placeholder is replaced the same way inside an attribute, a text node or
    any other literal. Names missing from the table are left verbatim.
    All names are matched in a single pass, longest first, so
    `@string/app_scheme` is never split by a shorter `app` entry and a value
    that itself contains `@string/...` is inserted as is.
    """
    if not table:
        return raw_manifest

    names = sorted(table, key=lambda n: (-len(n), n))
    pattern = re.compile("|".join(re.escape(STRING_PLACEHOLDER_PREFIX + n) for n in names))
    prefix_len = len(STRING_PLACEHOLDER_PREFIX)

    text, replaced = pattern.subn(lambda m: table[m.group(0)[prefix_len:]], raw_manifest)

    logger.debug(f"[MANIFEST] Substituted {replaced} string placeholder(s)")
    return text
