"""Offline detection client.

Shows the shape a provider adapter needs: implement BaseDetectionClient and
register the provider name in DetectorFactory.
"""

import json

from cuefix.detection.client_base import BaseDetectionClient
from cuefix.detection.models import ChatRequest


class ExampleClientAdapter(BaseDetectionClient):
    """Always suggests the same encoding without any network traffic."""

    def __init__(self, encoding: str = "gb18030") -> None:
        self._encoding = encoding

    def complete(self, request: ChatRequest) -> str:
        _ = request
        return json.dumps({"encoding": self._encoding, "cleaned_text": ""})
