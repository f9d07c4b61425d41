from cuefix.classification.classifier import GarbledTextClassifier, is_garbled

__all__ = ["GarbledTextClassifier", "is_garbled"]
