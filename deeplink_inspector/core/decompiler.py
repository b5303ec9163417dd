import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from deeplink_inspector.config.defaults import APKTOOL_COMMAND, DECOMPILED_DIR_SUFFIX
from deeplink_inspector.core.errors import DecompileError
from deeplink_inspector.utils.logger import get_logger

logger = get_logger()


def default_output_dir(apk_path: Path) -> Path:
    """app.apk → app_decompiled, next to the APK."""
    name = apk_path.name[:-4] if apk_path.name.endswith(".apk") else apk_path.name
    return apk_path.with_name(name + DECOMPILED_DIR_SUFFIX)


def decompile_apk(apk_path: Path, output_dir: Optional[Path] = None) -> Path:
    """
    Decode an APK with ApkTool so the manifest and resources are plain XML.

    Returns:
        Path to the decompiled output directory.

    Raises:
        DecompileError: apktool is not on PATH or exits with an error.
    """
    apk_path = Path(apk_path)
    output_dir = Path(output_dir) if output_dir else default_output_dir(apk_path)

    apktool_path = shutil.which(APKTOOL_COMMAND)
    if not apktool_path:
        raise DecompileError(f"Error decompiling APK: `{APKTOOL_COMMAND}` not found in PATH", apk_path)

    apktool_cmd = [apktool_path, "d", str(apk_path), "-o", str(output_dir), "-f"]
    logger.info(f"Running ApkTool: {' '.join(apktool_cmd)}")

    try:
        result = subprocess.run(
            apktool_cmd,
            check=True,
            capture_output=True,
            text=True,
            shell=os.name == "nt"  # shell=True only on Windows
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"ApkTool failed with exit code {e.returncode}")
        logger.error(e.stderr)
        raise DecompileError(f"Error decompiling APK: apktool exited with code {e.returncode}", apk_path) from e
    except OSError as e:
        raise DecompileError(f"Error decompiling APK: {e}", apk_path) from e

    logger.debug(result.stdout)
    logger.debug(result.stderr)
    logger.info(f"Decompiled successfully using ApkTool: {output_dir}")
    return output_dir
