import json
from pathlib import Path

from deeplink_inspector.reports.models import DeeplinkReport
from deeplink_inspector.reports.schemas import DeeplinkReportModel
from deeplink_inspector.utils.logger import get_logger


class ReportSaver:
    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.logger = get_logger()

    def save_report(self, report: DeeplinkReport) -> Path:
        """
        Write the report as JSON. Raises OSError if the file cannot be written.
        """
        model = DeeplinkReportModel.from_report(report)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with self.output_path.open("w", encoding="utf-8") as f:
            json.dump(model.model_dump(), f, indent=2, ensure_ascii=False)
        self.logger.info(
            f"[✓] Report with {model.deeplink_count()} deeplink(s) written to {self.output_path.resolve()}"
        )
        return self.output_path
