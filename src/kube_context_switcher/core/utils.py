import os
import stat
import contextlib
from pathlib import Path
from typing import Generator, Any

from kube_context_switcher.config.constants import COLUMN_WIDTH, ELLIPSIS, PLACEHOLDER


def truncate(value: Any, width: int = COLUMN_WIDTH) -> str:
    """Fits a display value into a fixed-width column."""
    if value is None:
        return PLACEHOLDER
    text = str(value)
    if len(text) > width:
        return text[:width - 1] + ELLIPSIS
    return text

@contextlib.contextmanager
def atomic_write(target_path: Path) -> Generator[Any, None, None]:
    """
    Atomic write pattern: write to temp, then rename.
    The replacement keeps the permission bits of the file it replaces
    (0600 for a new file, kubeconfigs carry credentials).
    """
    # Follow symlinks so the link itself is not replaced by a regular file
    target_path = Path(os.path.realpath(target_path))
    # Create a temp path alongside the target
    temp_path = target_path.with_suffix(target_path.suffix + ".tmp")

    try:
        permissions = stat.S_IMODE(os.stat(target_path).st_mode)
    except FileNotFoundError:
        permissions = 0o600

    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)

        with open(temp_path, "w", encoding="utf-8") as f:
            yield f

            # Ensure flush to disk
            f.flush()
            os.fsync(f.fileno())

        os.chmod(temp_path, permissions)

        # Atomic replace
        os.replace(temp_path, target_path)

    except Exception:
        # Cleanup temp file on failure
        if temp_path.exists():
            os.unlink(temp_path)
        raise
