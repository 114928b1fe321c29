import os
from pathlib import Path
from typing import Mapping, Optional

# Kubeconfig location
KUBECONFIG_ENV_VAR = "KUBECONFIG"
DEFAULT_KUBECONFIG = "~/.kube/config"

# Document keys
CURRENT_CONTEXT_KEY = "current-context"
CONTEXTS_KEY = "contexts"

# Display
COLUMN_WIDTH = 30
CURRENT_MARKER = "(*)"
ELLIPSIS = "…"
PLACEHOLDER = "-"
HIGHLIGHT_SYMBOL = "► "
# Panel borders (2) + table header (1) + header rule (1)
PICKER_CHROME_ROWS = 4
PICKER_TITLE = "Kubernetes Contexts (Press 'q' to quit, ↑/↓ or j/k to navigate, Enter to select)"


def resolve_kubeconfig_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolves the kubeconfig to operate on.

    KUBECONFIG wins when set; only its first entry is used since contexts
    from several files are never merged. Falls back to ~/.kube/config.
    """
    if environ is None:
        environ = os.environ

    env_value = environ.get(KUBECONFIG_ENV_VAR, "")
    for entry in env_value.split(os.pathsep):
        if entry.strip():
            return Path(entry.strip()).expanduser()

    return Path(os.path.expanduser(DEFAULT_KUBECONFIG))
