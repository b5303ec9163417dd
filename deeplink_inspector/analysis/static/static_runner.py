from pathlib import Path

from deeplink_inspector.analysis.static.exposure_classifier import classify_components
from deeplink_inspector.analysis.static.manifest_parser import load_manifest_text, parse_manifest
from deeplink_inspector.analysis.static.placeholder_substitutor import substitute_placeholders
from deeplink_inspector.analysis.static.res_parser import load_string_table
from deeplink_inspector.analysis.static.uri_deriver import derive_reports
from deeplink_inspector.reports.models import DeeplinkReport
from deeplink_inspector.utils.logger import get_logger

logger = get_logger()


def run_static_analysis(manifest_path: Path, strings_path: Path) -> DeeplinkReport:
    """
    Resolve string placeholders, parse the manifest and derive the exported
    components with their deeplinks.

    Any DeeplinkInspectorError raised by a stage propagates unchanged; there
    is no partial report.
    """
    logger.info(f"[*] Reading string resources: {strings_path}")
    table = load_string_table(strings_path)

    logger.info(f"[*] Reading manifest: {manifest_path}")
    raw_manifest = load_manifest_text(manifest_path)
    resolved = substitute_placeholders(raw_manifest, table)

    document = classify_components(parse_manifest(resolved))

    report = DeeplinkReport(
        manifest_path=str(manifest_path),
        strings_path=str(strings_path),
        package_name=document.package_name,
        **{category: derive_reports(components) for category, components in document.categories().items()}
    )

    exported = sum(len(v) for v in report.categories().values())
    logger.info(f"[✓] {exported} exported component(s) found in {document.package_name or manifest_path}")
    return report
