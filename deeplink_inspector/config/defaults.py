from pathlib import Path

# ─── Decompiled Layout ──────────────────────────────────────
MANIFEST_RELATIVE_PATH = Path("AndroidManifest.xml")
STRINGS_RELATIVE_PATH = Path("res") / "values" / "strings.xml"
DECOMPILED_DIR_SUFFIX = "_decompiled"                     # app.apk → app_decompiled/

# ─── External Tools ─────────────────────────────────────────
APKTOOL_COMMAND = "apktool"

# ─── Manifest Vocabulary ────────────────────────────────────
ANDROID_NS = "http://schemas.android.com/apk/res/android"
STRING_PLACEHOLDER_PREFIX = "@string/"

# Report category → manifest tag, in report order
COMPONENT_CATEGORIES = {
    "activities": "activity",
    "aliases": "activity-alias",
    "services": "service",
    "receivers": "receiver",
}

SECTION_TITLES = {
    "activities": "Activities",
    "aliases": "Aliases",
    "services": "Services",
    "receivers": "Receivers",
}

# ─── Console ────────────────────────────────────────────────
BANNER = """
  ==========================================================
    Deeplink Inspector
    Decompile, find exported components and deeplinks
  ==========================================================
"""
