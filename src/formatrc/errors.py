from pathlib import Path


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or validated"""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
