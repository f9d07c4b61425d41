from abc import ABC, abstractmethod

from cuefix.detection.models import ChatRequest


class BaseDetectionClient(ABC):
    """Seam between RemoteDetector and a chat-completion provider."""

    @abstractmethod
    def complete(self, request: ChatRequest) -> str:
        """Send *request* and return the provider's reply text unparsed.

        Raises:
            DetectionNetworkError: when the call may succeed if repeated.
            DetectionError: when the provider answered but the answer is unusable.
        """
