"""Scanner exceptions."""


class ManifestReadError(Exception):
    """Raised when a workspace folder or manifest file cannot be read."""
