from typing import Any

import httpx
import openai

from cuefix.detection.client_base import BaseDetectionClient
from cuefix.detection.exceptions import DetectionError, DetectionNetworkError
from cuefix.detection.models import ChatRequest


class OpenAIClientAdapter(BaseDetectionClient):
    """Asks any OpenAI-compatible chat endpoint for an encoding suggestion.

    The SDK's own retries are disabled; RemoteDetector decides how many
    attempts a detection gets.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def complete(self, request: ChatRequest) -> str:
        try:
            response = self._client.chat.completions.create(**self._payload(request))
        except (openai.APIConnectionError, httpx.TransportError) as exc:
            raise DetectionNetworkError(f"Cannot reach detection provider: {exc}") from exc
        except (openai.RateLimitError, openai.InternalServerError) as exc:
            raise DetectionNetworkError(
                f"Detection provider unavailable ({exc.status_code}): {exc.message}"
            ) from exc
        except openai.APIStatusError as exc:
            raise DetectionError(
                f"Detection provider rejected the request ({exc.status_code}): {exc.message}"
            ) from exc
        except openai.APIError as exc:
            raise DetectionError(f"Detection provider error: {exc}") from exc
        return self._reply_text(response)

    @staticmethod
    def _payload(request: ChatRequest) -> dict[str, Any]:
        return {
            "model": request.model,
            "temperature": request.temperature,
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": request.schema_name,
                    "strict": True,
                    "schema": request.json_schema,
                },
            },
            "messages": [
                {"role": "system", "content": request.system_prompt},
                {"role": "user", "content": request.user_prompt},
            ],
        }

    @staticmethod
    def _reply_text(response: Any) -> str:
        if not response.choices:
            raise DetectionError("Detection provider returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise DetectionError("Detection provider returned an empty reply")
        return str(content)
