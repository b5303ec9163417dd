import argparse
from pathlib import Path
from typing import List, Optional

from deeplink_inspector import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deeplink-inspector",
        description="Deeplink Inspector: list exported Android components and their deeplinks"
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--apk", type=Path,
                        help="Path to the APK file to be decompiled with apktool")
    source.add_argument("--folder", type=Path,
                        help="Folder to search in if the APK is already decompiled")

    parser.add_argument("--json-out", type=Path, default=None,
                        help="Also write the report as JSON to this path")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Write the full log to this file")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable colored console output")
    parser.add_argument("--no-banner", action="store_true",
                        help="Do not print the banner")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
