from pathlib import Path
from typing import Optional


class DeeplinkInspectorError(RuntimeError):
    """
    Fatal error that aborts an analysis run.

    `stage` names the pipeline step that failed so the entry point can
    report it in a single line.
    """

    stage = "analysis"

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} ({self.path})" if self.path else base


class InputReadError(DeeplinkInspectorError):
    def __init__(self, stage: str, message: str, path: Optional[Path] = None):
        super().__init__(message, path)
        self.stage = stage


class ManifestParseError(DeeplinkInspectorError):
    stage = "manifest-parse"


class DecompileError(DeeplinkInspectorError):
    stage = "decompile"
