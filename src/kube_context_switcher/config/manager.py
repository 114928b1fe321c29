from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from pydantic import ValidationError

from kube_context_switcher.config.constants import CURRENT_CONTEXT_KEY
from kube_context_switcher.config.models import KubeContext, Kubeconfig
from kube_context_switcher.core.utils import atomic_write
from kube_context_switcher.core.exceptions import ConfigIOError, ConfigParseError


class KubeconfigManager:
    """
    Reads contexts from a kubeconfig and writes back its current-context.
    The path is resolved by the caller; this class never looks at the environment.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_document(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise ConfigIOError(f"Cannot read kubeconfig '{self.path}': {e.strerror or e}")

        try:
            document = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Kubeconfig '{self.path}' is not valid YAML: {e}")

        if document is None:
            # Empty file
            return {}
        if not isinstance(document, dict):
            raise ConfigParseError(f"Kubeconfig '{self.path}' must be a mapping at the top level.")
        return document

    def _validate(self, document: Dict[str, Any]) -> Kubeconfig:
        try:
            return Kubeconfig.model_validate(document)
        except ValidationError as e:
            raise ConfigParseError(f"Kubeconfig '{self.path}' has an invalid schema: {e}")

    def load(self) -> Tuple[List[KubeContext], str]:
        """Returns the contexts in file order and the current context name ("" if unset)."""
        config = self._validate(self._read_document())
        return config.to_records(), config.current_context or ""

    def save(self, context_name: str):
        """
        Sets current-context, re-reading the file first so edits made since load() survive.
        The name is written as given; existence is the caller's concern.
        """
        document = self._read_document()
        self._validate(document)
        document[CURRENT_CONTEXT_KEY] = context_name

        try:
            with atomic_write(self.path) as f:
                yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        except OSError as e:
            raise ConfigIOError(f"Failed to write kubeconfig '{self.path}': {e.strerror or e}")

    def context_names(self) -> List[str]:
        records, _ = self.load()
        return [r.name for r in records]
