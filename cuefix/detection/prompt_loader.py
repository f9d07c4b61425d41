"""Bundled prompt and response schema for remote encoding detection."""

import json
from pathlib import Path

from cuefix.detection.exceptions import DetectionError

PROMPTS_DIR = Path(__file__).parent / "prompts"
PROMPT_FILE = "detection_prompt.txt"
SCHEMA_FILE = "detection_schema.json"

REQUIRED_PLACEHOLDERS = ("{snippet}",)


def load_prompt_template(path: Path | None = None) -> str:
    """Load a prompt template; defaults to the bundled one.

    Besides ``{snippet}`` the template may use ``{candidates}`` and
    ``{json_schema}``.

    Raises:
        DetectionError: if the file cannot be read or lacks ``{snippet}``.
    """
    template = _read(path or PROMPTS_DIR / PROMPT_FILE, "prompt template")
    missing = [p for p in REQUIRED_PLACEHOLDERS if p not in template]
    if missing:
        raise DetectionError(f"Prompt template is missing placeholders: {missing}")
    return template


def load_json_schema(path: Path | None = None) -> dict[str, object]:
    """Load and parse the response JSON schema.

    Raises:
        DetectionError: if the file cannot be read or is not a JSON object.
    """
    raw = _read(path or PROMPTS_DIR / SCHEMA_FILE, "JSON schema")
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DetectionError(f"Invalid JSON schema: {exc}") from exc
    if not isinstance(schema, dict):
        raise DetectionError("JSON schema must be an object")
    return schema


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DetectionError(f"Failed to load {what}: {exc}") from exc
