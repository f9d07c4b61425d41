from cuefix.detection.base import BaseDetector
from cuefix.detection.factory import DetectorFactory
from cuefix.detection.heuristic import HeuristicDetector
from cuefix.detection.models import DetectionResult
from cuefix.detection.remote import RemoteDetector

__all__ = [
    "BaseDetector",
    "DetectionResult",
    "DetectorFactory",
    "HeuristicDetector",
    "RemoteDetector",
]
