from abc import ABC, abstractmethod


class BaseScriptNormalizer(ABC):
    """Contract for all script normalization adapters."""

    @abstractmethod
    def normalize(self, text: str) -> str:
        """Convert Traditional Chinese characters in *text* to Simplified.

        Must leave already-Simplified and non-Chinese text unchanged.

        Raises:
            ScriptNormalizationError: on any failure.
        """
