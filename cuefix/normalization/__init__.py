from cuefix.normalization.base import BaseScriptNormalizer
from cuefix.normalization.factory import ScriptNormalizerFactory
from cuefix.normalization.icu_normalizer import IcuScriptNormalizer

__all__ = ["BaseScriptNormalizer", "IcuScriptNormalizer", "ScriptNormalizerFactory"]
