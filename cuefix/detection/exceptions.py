class DetectionError(Exception):
    """Raised when a remote detection strategy cannot produce a suggestion."""


class DetectionValidationError(DetectionError):
    """Raised when a provider response fails schema or domain validation."""


class DetectionNetworkError(DetectionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
