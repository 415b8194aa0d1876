"""Generated env script that exports the bin directory onto PATH."""

import logging

from pathsync.core.directives import export_line
from pathsync.core.errors import ScriptWriteError
from pathsync.core.install_root import InstallRoot

logger = logging.getLogger(__name__)


def env_script_content(install_root: InstallRoot) -> str:
    return export_line(install_root) + "\n"


def ensure_script(install_root: InstallRoot) -> bool:
    """Write <install_root>/env.sh unless it already exists.

    The script is owned by pathsync and never merged: an existing file is
    left exactly as it is.

    Args:
        install_root: Install root whose bin directory the script exports

    Returns:
        True if the script was written, False if it already existed

    Raises:
        ScriptWriteError: If the directory or file cannot be written
    """
    script_path = install_root.env_script_path
    if script_path.exists():
        logger.debug("Env script already present at %s", script_path)
        return False

    try:
        script_path.parent.mkdir(parents=True, exist_ok=True)
        script_path.write_text(env_script_content(install_root), encoding="utf-8")
    except OSError as e:
        raise ScriptWriteError(script_path) from e

    logger.debug("Wrote env script %s", script_path)
    return True
