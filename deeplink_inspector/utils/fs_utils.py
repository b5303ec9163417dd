from pathlib import Path

from deeplink_inspector.core.errors import InputReadError


def read_input_bytes(path: Path, stage: str, label: str) -> bytes:
    """
    Read one of the analysis inputs.

    Raises:
        InputReadError: the file is missing or unreadable; `stage` is carried
        on the error so the caller can say which input failed.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise InputReadError(stage, f"Error reading {label} file: {e.strerror or e}", Path(path)) from e
