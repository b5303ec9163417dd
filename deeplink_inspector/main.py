import sys
from pathlib import Path
from typing import List, Optional

from colorama import just_fix_windows_console

from deeplink_inspector import __version__
from deeplink_inspector.analysis.static.static_runner import run_static_analysis
from deeplink_inspector.cli.cli import parse_args
from deeplink_inspector.config.defaults import BANNER
from deeplink_inspector.core.decompiler import decompile_apk
from deeplink_inspector.core.errors import DeeplinkInspectorError
from deeplink_inspector.core.workspace_manager import WorkspaceManager
from deeplink_inspector.reports.console_reporter import ConsoleReporter
from deeplink_inspector.reports.report_saver import ReportSaver
from deeplink_inspector.utils.logger import init_logging


def resolve_workspace(args, console: ConsoleReporter) -> WorkspaceManager:
    if args.apk:
        console.info("Decompiling APK...")
        return WorkspaceManager(decompile_apk(args.apk))

    console.info("Using provided folder for search...")
    return WorkspaceManager(args.folder)


def run_analysis(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logger = init_logging(verbose=args.verbose, log_path=args.log_file)
    console = ConsoleReporter(use_color=not args.no_color)
    if not args.no_banner:
        console.banner(BANNER, __version__)

    try:
        workspace = resolve_workspace(args, console)
        report = run_static_analysis(workspace.manifest_path, workspace.strings_path)
    except DeeplinkInspectorError as ex:
        logger.debug(f"[✗] {ex.stage} failed: {ex}")
        console.error(str(ex))
        return 1

    console.render(report)

    if args.json_out:
        try:
            ReportSaver(args.json_out).save_report(report)
        except OSError as ex:
            logger.error(f"[✗] Failed to write JSON report: {ex}")
            console.error(f"Error writing JSON report: {ex}")
            return 1

    console.info("Done.")
    return 0


def main():
    """
    Console entry point. Returns 0 on success, 1 on a fatal error.
    """
    just_fix_windows_console()
    try:
        sys.exit(run_analysis())
    except Exception as ex:
        print(f"[ERROR] {type(ex).__name__}: {ex}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
