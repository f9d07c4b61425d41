from cuefix.config.settings import Settings
from cuefix.normalization.base import BaseScriptNormalizer
from cuefix.normalization.icu_normalizer import IcuScriptNormalizer


class ScriptNormalizerFactory:
    """Creates the configured script normalizer, if enabled."""

    ADAPTERS: dict[str, type[BaseScriptNormalizer]] = {
        "icu": IcuScriptNormalizer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseScriptNormalizer | None:
        """Return a normalizer, or None when normalization is switched off."""
        if not settings.normalize_script:
            return None
        engine = settings.script_normalizer_engine.strip().lower()
        if engine == "none":
            return None
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown script normalizer engine '{engine}'. "
                f"Choose from: {[*cls.ADAPTERS, 'none']}"
            )
        return adapter_cls()
