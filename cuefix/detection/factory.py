from typing import ClassVar

from cuefix.config.settings import Settings
from cuefix.detection.base import BaseDetector
from cuefix.detection.client_base import BaseDetectionClient
from cuefix.detection.example_client_adapter import ExampleClientAdapter
from cuefix.detection.heuristic import HeuristicDetector
from cuefix.detection.openai_client_adapter import OpenAIClientAdapter
from cuefix.detection.remote import RemoteDetector


class DetectorFactory:
    """Creates the configured detection strategy."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDetector:
        """Create a detector from application settings.

        ``heuristic`` needs no network; every other provider wraps a remote
        client and falls back to the heuristic detector on failure.
        """
        provider = settings.detection_provider.strip().lower()
        heuristic = HeuristicDetector()
        if provider == "heuristic":
            return heuristic
        if provider == "example":
            return cls._remote(settings, ExampleClientAdapter(), "example", heuristic)

        base_url = cls._resolve_base_url(provider, settings)
        model = cls._resolve_model_name(provider, settings)
        if not model:
            raise ValueError(
                f"detection_{provider}_model_name is required for "
                f"detection_provider={provider}"
            )
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
        )
        return cls._remote(settings, client, model, heuristic)

    @classmethod
    def supported_providers(cls) -> list[str]:
        return [
            "heuristic",
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]

    @staticmethod
    def _remote(
        settings: Settings,
        client: BaseDetectionClient,
        model: str,
        heuristic: HeuristicDetector,
    ) -> RemoteDetector:
        return RemoteDetector(
            client=client,
            model=model,
            fallback=heuristic,
            temperature=settings.detection_temperature,
            max_attempts=settings.detection_max_attempts,
            snippet_chars=settings.detection_snippet_chars,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.detection_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "detection_openai_compatible_base_url is required for "
                    "detection_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown detection provider '{provider}'. "
            f"Choose from: {cls.supported_providers()}"
        )

    @staticmethod
    def _resolve_api_key(provider: str, settings: Settings) -> str:
        return str(getattr(settings, f"detection_{provider}_api_key", "") or "")

    @staticmethod
    def _resolve_model_name(provider: str, settings: Settings) -> str:
        return str(getattr(settings, f"detection_{provider}_model_name", "") or "")

    @staticmethod
    def _resolve_timeout_seconds(provider: str, settings: Settings) -> int:
        return int(getattr(settings, f"detection_{provider}_timeout_seconds", 30) or 30)
