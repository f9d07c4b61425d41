from cuefix.batch.models import FileStatus
from cuefix.batch.pipeline import FixContext, PipelineStep
from cuefix.detection.base import BaseDetector
from cuefix.logging.logger import Log
from cuefix.normalization.base import BaseScriptNormalizer


class MarkProcessingStep(PipelineStep):
    def run(self, context: FixContext) -> FixContext:
        context.record.status = FileStatus.PROCESSING
        context.record.error_message = None
        Log.debug(f"Fixing {context.record.path}", record_id=context.record.id)
        return context


class MarkFailedStep(PipelineStep):
    def run(self, context: FixContext) -> FixContext:
        context.record.status = FileStatus.ERROR
        context.record.error_message = context.error_message
        Log.error(
            f"Fixing {context.record.path} failed: {context.error_message}",
            record_id=context.record.id,
        )
        return context


class DetectEncodingStep(PipelineStep):
    def __init__(self, detector: BaseDetector) -> None:
        self._detector = detector

    def run(self, context: FixContext) -> FixContext:
        result = self._detector.detect(context.record.document.raw, context.encoding)
        context.result = result
        Log.info(
            f"Decoded {context.record.path} as {result.encoding} ({result.strategy})",
            record_id=context.record.id,
        )
        return context


class NormalizeScriptStep(PipelineStep):
    def __init__(self, normalizer: BaseScriptNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: FixContext) -> FixContext:
        if context.result is None:
            raise ValueError("FixContext.result must be set before script normalization")
        context.normalized_text = self._normalizer.normalize(context.result.text)
        return context


class MarkFixedStep(PipelineStep):
    def run(self, context: FixContext) -> FixContext:
        if context.result is None:
            raise ValueError("FixContext.result must be set before marking fixed")
        record = context.record
        record.result = context.result
        record.detected_encoding = context.result.encoding
        record.normalized_text = context.normalized_text
        record.status = FileStatus.FIXED
        if context.result.possibly_garbled:
            Log.warning(
                f"{record.path} may still be garbled as {context.result.encoding}; "
                "pick an encoding manually",
                record_id=record.id,
            )
        return context
