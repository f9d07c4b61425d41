class ScriptNormalizationError(Exception):
    """Raised when Traditional-to-Simplified conversion cannot be performed."""
