from typing import List, Optional

from deeplink_inspector.reports.models import Component, ComponentReport, DataRule
from deeplink_inspector.utils.logger import get_logger

logger = get_logger()


def is_uri_matching(rule: DataRule) -> bool:
    """A rule addresses a URI only if it declares at least one URI attribute."""
    return any((
        rule.scheme,
        rule.host,
        rule.port,
        rule.path,
        rule.path_prefix,
        rule.path_pattern,
    ))


def select_path(rule: DataRule) -> str:
    # exact path > prefix > pattern
    return rule.path or rule.path_prefix or rule.path_pattern or ""


def normalize_path(path: str) -> str:
    if path and not path.startswith("/"):
        return "/" + path
    return path


def construct_uri(rule: DataRule) -> Optional[str]:
    """
    Build `<scheme>://<host><path>` for a URI-matching data rule.

    Returns None for rules that carry no URI attribute (e.g. mimeType only).
    Scheme and host are emitted as declared, so an incomplete declaration
    yields an incomplete URI such as `://host`. The port is not part of the
    result.
    """
    if not is_uri_matching(rule):
        return None

    path = normalize_path(select_path(rule))
    return f"{rule.scheme or ''}://{rule.host or ''}{path}"


def derive_uris(component: Component) -> List[str]:
    uris = []
    for intent_filter in component.filters:
        for rule in intent_filter.data_rules:
            uri = construct_uri(rule)
            if uri is None:
                logger.debug(f"[DEEPLINK] {component.name or '<unnamed>'}: skipping data rule without URI attributes")
                continue
            uris.append(uri)
    return uris


def derive_component_report(component: Component) -> Optional[ComponentReport]:
    """
    Collect actions and deeplinks for an exported component.

    Non-exported components return None and their data rules are never
    looked at.
    """
    if not component.is_exported:
        return None

    actions = [action for f in component.filters for action in f.actions]
    return ComponentReport(
        name=component.name,
        is_exported=True,
        actions=actions,
        uris=derive_uris(component),
    )


def derive_reports(components: List[Component]) -> List[ComponentReport]:
    reports = []
    for component in components:
        report = derive_component_report(component)
        if report is not None:
            reports.append(report)
    return reports
