from abc import ABC, abstractmethod
from dataclasses import dataclass

from cuefix.batch.models import FixedRecord
from cuefix.detection.models import DetectionResult


@dataclass(slots=True)
class FixContext:
    record: FixedRecord
    encoding: str | None = None
    result: DetectionResult | None = None
    normalized_text: str | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: FixContext) -> FixContext:
        raise NotImplementedError
