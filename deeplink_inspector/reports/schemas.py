from typing import List

from pydantic import BaseModel, Field, field_validator

from deeplink_inspector.reports.models import ComponentReport, DeeplinkReport


class ComponentReportModel(BaseModel):
    name: str
    exported: bool = True
    actions: List[str] = []
    deeplinks: List[str] = []

    @field_validator("actions", mode="before")
    @classmethod
    def drop_blank_actions(cls, v):
        if not isinstance(v, list):
            return [str(v)]
        return [str(a) for a in v if a]

    @classmethod
    def from_component(cls, component: ComponentReport) -> "ComponentReportModel":
        return cls(
            name=component.name,
            exported=component.is_exported,
            actions=list(component.actions),
            deeplinks=list(component.uris),
        )


class DeeplinkReportModel(BaseModel):
    package_name: str = ""
    manifest_path: str = ""
    strings_path: str = ""
    activities: List[ComponentReportModel] = Field(default_factory=list)
    aliases: List[ComponentReportModel] = Field(default_factory=list)
    services: List[ComponentReportModel] = Field(default_factory=list)
    receivers: List[ComponentReportModel] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: DeeplinkReport) -> "DeeplinkReportModel":
        return cls(
            package_name=report.package_name,
            manifest_path=report.manifest_path,
            strings_path=report.strings_path,
            **{
                category: [ComponentReportModel.from_component(c) for c in components]
                for category, components in report.categories().items()
            }
        )

    def deeplink_count(self) -> int:
        return sum(
            len(c.deeplinks)
            for group in (self.activities, self.aliases, self.services, self.receivers)
            for c in group
        )
