from pathlib import Path

from deeplink_inspector.config.defaults import MANIFEST_RELATIVE_PATH, STRINGS_RELATIVE_PATH


class WorkspaceManager:
    """
    Knows where the analysis inputs live inside a decompiled APK directory.
    """

    def __init__(self, decompiled_dir: Path):
        self.decompiled_dir = Path(decompiled_dir)

    @property
    def manifest_path(self) -> Path:
        return self.decompiled_dir / MANIFEST_RELATIVE_PATH

    @property
    def strings_path(self) -> Path:
        return self.decompiled_dir / STRINGS_RELATIVE_PATH
