class KubeSwitchError(Exception):
    """Base class for all kube-context-switcher errors."""
    def __init__(self, message: str, code: int = 1):
        self.message = message
        self.code = code
        super().__init__(self.message)

class ConfigError(KubeSwitchError):
    """Raised when there is an issue loading or saving the kubeconfig."""
    pass

class ConfigIOError(ConfigError):
    """The kubeconfig could not be opened, read or written."""
    pass

class ConfigParseError(ConfigError):
    """The kubeconfig is not valid YAML or does not match the expected schema."""
    pass

class ContextNotFoundError(KubeSwitchError):
    def __init__(self, context_name: str):
        super().__init__(f"Context '{context_name}' not found.", code=1)
