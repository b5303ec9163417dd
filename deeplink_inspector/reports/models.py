from dataclasses import dataclass, field, asdict
from types import MappingProxyType
from typing import List, Dict, Any, Optional, Mapping

# name → resolved text; read-only view built once per run
StringTable = Mapping[str, str]


def freeze_string_table(entries: Dict[str, str]) -> StringTable:
    return MappingProxyType(dict(entries))


@dataclass(frozen=True)
class DataRule:
    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None
    path: Optional[str] = None
    path_prefix: Optional[str] = None
    path_pattern: Optional[str] = None


@dataclass(frozen=True)
class IntentFilter:
    actions: List[str] = field(default_factory=list)
    data_rules: List[DataRule] = field(default_factory=list)


@dataclass(frozen=True)
class Component:
    name: str = ""
    exported_raw: Optional[str] = None   # "true" | "false" | None | anything else
    is_exported: bool = False            # set by the exposure classifier
    filters: List[IntentFilter] = field(default_factory=list)


@dataclass(frozen=True)
class ManifestDocument:
    package_name: str = ""
    activities: List[Component] = field(default_factory=list)
    aliases: List[Component] = field(default_factory=list)
    services: List[Component] = field(default_factory=list)
    receivers: List[Component] = field(default_factory=list)

    def categories(self) -> Dict[str, List[Component]]:
        return {
            "activities": self.activities,
            "aliases": self.aliases,
            "services": self.services,
            "receivers": self.receivers,
        }


@dataclass(frozen=True)
class ComponentReport:
    name: str
    is_exported: bool
    actions: List[str] = field(default_factory=list)
    uris: List[str] = field(default_factory=list)

    def as_tuple(self):
        return (self.name, self.is_exported, list(self.actions), list(self.uris))


@dataclass
class DeeplinkReport:
    manifest_path: str = ""
    strings_path: str = ""
    package_name: str = ""
    activities: List[ComponentReport] = field(default_factory=list)
    aliases: List[ComponentReport] = field(default_factory=list)
    services: List[ComponentReport] = field(default_factory=list)
    receivers: List[ComponentReport] = field(default_factory=list)

    def categories(self) -> Dict[str, List[ComponentReport]]:
        return {
            "activities": self.activities,
            "aliases": self.aliases,
            "services": self.services,
            "receivers": self.receivers,
        }

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
