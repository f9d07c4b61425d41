from dataclasses import dataclass, field


@dataclass(frozen=True)
class DetectionResult:
    """Chosen decoding of one raw document.

    ``possibly_garbled`` is set when every candidate was rejected and the text
    comes from the lenient fallback, or when a manual override produced text
    the classifier rejects.
    """

    text: str
    encoding: str
    possibly_garbled: bool = False
    strategy: str = "heuristic"


@dataclass(frozen=True)
class EncodingSuggestion:
    """Validated answer of a remote detection provider."""

    encoding: str
    cleaned_text: str = ""
    raw: dict[str, object] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class ChatRequest:
    """One JSON-constrained question put to a detection provider."""

    model: str
    system_prompt: str
    user_prompt: str
    json_schema: dict[str, object]
    schema_name: str = "encoding_suggestion"
    temperature: float = 0.0
