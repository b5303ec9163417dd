from dataclasses import replace
from typing import List, Optional

from deeplink_inspector.reports.models import Component, ManifestDocument

TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}


def parse_exported(raw: Optional[str]) -> bool:
    """
    Read a declared android:exported value.

    Only the canonical boolean literals count. Absent, empty or unrecognized
    values give False: a component without an explicit `exported="true"` is
    not treated as reachable, even though Android may infer it from the
    presence of intent filters.
    """
    return raw in TRUE_LITERALS


def classify_component(component: Component) -> Component:
    return replace(component, is_exported=parse_exported(component.exported_raw))


def _classify_all(components: List[Component]) -> List[Component]:
    return [classify_component(c) for c in components]


def classify_components(document: ManifestDocument) -> ManifestDocument:
    return replace(
        document,
        activities=_classify_all(document.activities),
        aliases=_classify_all(document.aliases),
        services=_classify_all(document.services),
        receivers=_classify_all(document.receivers),
    )
