from collections.abc import Sequence

from cuefix.classification.rules import DEFAULT_RULES, Predicate


class GarbledTextClassifier:
    """Judges whether decoded text is plausible using an ordered rule chain."""

    def __init__(self, rules: Sequence[tuple[str, Predicate]] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def rule_names(self) -> list[str]:
        return [name for name, _ in self._rules]

    def first_match(self, text: str) -> str | None:
        """Return the name of the first rule that flags *text*, or None."""
        for name, predicate in self._rules:
            if predicate(text):
                return name
        return None

    def is_garbled(self, text: str) -> bool:
        return self.first_match(text) is not None


_default = GarbledTextClassifier()


def is_garbled(text: str) -> bool:
    """Classify *text* with the default rule chain."""
    return _default.is_garbled(text)
