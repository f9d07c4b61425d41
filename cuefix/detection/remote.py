"""AI-assisted encoding detector.

The provider only suggests an encoding. The suggestion is verified locally
with the same strict decode and classifier the heuristic detector uses, and
every provider failure degrades to local detection.
"""

import json
from pathlib import Path

from cuefix.detection.base import BaseDetector
from cuefix.detection.client_base import BaseDetectionClient
from cuefix.detection.exceptions import DetectionError, DetectionNetworkError
from cuefix.detection.heuristic import HeuristicDetector
from cuefix.detection.models import ChatRequest, DetectionResult
from cuefix.detection.prompt_loader import load_json_schema, load_prompt_template
from cuefix.detection.validator import validate_suggestion
from cuefix.encoding.candidates import CANDIDATE_ENCODINGS, FALLBACK_ENCODING, is_auto
from cuefix.encoding.decoder import decode_lenient, require_bytes
from cuefix.logging.logger import Log

DEFAULT_SYSTEM_PROMPT = "You are a character encoding expert."


class RemoteDetector(BaseDetector):
    """Detects encodings by asking an AI provider, then verifying locally."""

    def __init__(
        self,
        *,
        client: BaseDetectionClient,
        model: str,
        fallback: HeuristicDetector | None = None,
        temperature: float = 0.0,
        max_attempts: int = 2,
        snippet_chars: int = 500,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._fallback = fallback if fallback is not None else HeuristicDetector()
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_attempts = max(1, max_attempts)
        self._snippet_chars = snippet_chars
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    def detect(self, raw: bytes, encoding: str | None = None) -> DetectionResult:
        raw = require_bytes(raw)
        if not is_auto(encoding):
            return self._fallback.detect(raw, encoding)

        try:
            hint = self.suggest_encoding(raw)
        except DetectionError as exc:
            Log.warning(f"Remote detection failed, using local heuristics: {exc}")
            return self._fallback.detect_auto(raw)

        text = self._fallback.try_candidate(raw, hint)
        if text is not None:
            Log.info(f"Remote suggestion {hint} accepted ({len(raw)} bytes)")
            return DetectionResult(text=text, encoding=hint, strategy="remote")

        Log.info(f"Remote suggestion {hint} rejected, trying local candidates")
        return self._fallback.detect_auto(raw, skip={hint})

    def suggest_encoding(self, raw: bytes) -> str:
        """Ask the provider for the original encoding of *raw*.

        The snippet is the lenient Windows-1252 view of the bytes, the mojibake
        a user actually sees. Every byte stays visible in it, where a lenient
        UTF-8 view would collapse legacy multi-byte text into U+FFFD.

        Raises:
            DetectionError: on network, parsing or validation failure.
        """
        snippet = decode_lenient(raw, FALLBACK_ENCODING)[: self._snippet_chars]
        prompt = self._build_prompt(snippet)
        Log.debug(f"Detection prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        suggestion = validate_suggestion(self._parse_json(raw_response))
        return suggestion.encoding

    def _build_prompt(self, snippet: str) -> str:
        return self._prompt_template.format(
            snippet=snippet,
            candidates=", ".join(CANDIDATE_ENCODINGS),
            json_schema=json.dumps(self._json_schema, indent=2),
        )

    def _call_ai(self, prompt: str) -> str:
        request = ChatRequest(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema,
            temperature=self._temperature,
        )
        for attempt in range(1, self._max_attempts + 1):
            try:
                return self._client.complete(request)
            except DetectionNetworkError as exc:
                if attempt >= self._max_attempts:
                    raise
                Log.warning(
                    f"Detection provider call failed "
                    f"(attempt {attempt}/{self._max_attempts}), retrying: {exc}"
                )
        raise DetectionError("No detection attempts were made")

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise DetectionError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise DetectionError("JSON response must be an object")
        return parsed
