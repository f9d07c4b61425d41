"""Batch orchestration of the fix workflow over many documents."""

import secrets
import string
from collections.abc import Callable, Iterable

from cuefix.batch.exceptions import RecordBusyError, RecordNotFoundError
from cuefix.batch.models import FileStatus, FixedRecord, RawDocument
from cuefix.batch.pipeline import FixContext, PipelineStep
from cuefix.batch.steps import (
    DetectEncodingStep,
    MarkFailedStep,
    MarkFixedStep,
    MarkProcessingStep,
    NormalizeScriptStep,
)
from cuefix.classification.classifier import is_garbled
from cuefix.config.settings import Settings
from cuefix.detection.factory import DetectorFactory
from cuefix.encoding.decoder import decode_lenient
from cuefix.logging.logger import Log
from cuefix.normalization.factory import ScriptNormalizerFactory

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_record_id() -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


class BatchFixer:
    """Keeps fix records in ingest order and runs the fix pipeline on them.

    One record's failure never stops its siblings. A record that is already
    being fixed cannot be fixed again until that run finishes.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        failed_step: PipelineStep,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        self._steps = steps
        self._failed_step = failed_step
        self._id_factory = id_factory
        self._records: dict[str, FixedRecord] = {}
        self._busy: set[str] = set()

    @property
    def records(self) -> list[FixedRecord]:
        return list(self._records.values())

    @property
    def fixed_records(self) -> list[FixedRecord]:
        return [r for r in self._records.values() if r.status == FileStatus.FIXED]

    def get(self, record_id: str) -> FixedRecord:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(f"Record {record_id} not found")
        return record

    def ingest(self, documents: Iterable[RawDocument]) -> list[FixedRecord]:
        """Add documents as pending records after a provisional UTF-8 check."""
        added: list[FixedRecord] = []
        for document in documents:
            record_id = self._id_factory()
            while record_id in self._records:
                record_id = self._id_factory()
            initial_text = decode_lenient(document.raw, "utf-8")
            record = FixedRecord(
                id=record_id,
                document=document,
                decoded_content=initial_text,
                detected_encoding="unknown" if is_garbled(initial_text) else "utf-8",
            )
            self._records[record_id] = record
            added.append(record)
        Log.info(f"Ingested {len(added)} documents ({len(self._records)} in batch)")
        return added

    def fix(self, record_id: str, encoding: str | None = None) -> FixedRecord:
        """Run the pipeline for one record.

        On failure the record is marked as errored and the exception is
        re-raised.

        Raises:
            RecordNotFoundError: if the record does not exist.
            RecordBusyError: if the record is already being fixed.
        """
        record = self.get(record_id)
        if record_id in self._busy:
            raise RecordBusyError(f"Record {record_id} is already being fixed")

        self._busy.add(record_id)
        context = FixContext(record=record, encoding=encoding)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc) or type(exc).__name__
            self._failed_step.run(context)
            raise
        finally:
            self._busy.discard(record_id)
        return record

    def fix_all(self, encoding: str | None = None) -> list[FixedRecord]:
        """Fix every record that is not fixed yet; failures stay per record."""
        pending = [r for r in self._records.values() if r.status != FileStatus.FIXED]
        for record in pending:
            try:
                self.fix(record.id, encoding)
            except RecordBusyError:
                Log.warning(
                    f"Skipping {record.path}: fix already in progress",
                    record_id=record.id,
                )
            except Exception:  # already recorded on the record
                continue
        failed = sum(1 for r in pending if r.status == FileStatus.ERROR)
        Log.info(f"Fixed {len(pending) - failed} of {len(pending)} records")
        return pending

    def remove(self, record_id: str) -> None:
        self.get(record_id)
        del self._records[record_id]

    def clear(self) -> None:
        self._records.clear()


def build_fixer(settings: Settings) -> BatchFixer:
    """Build a BatchFixer with the configured detector and normalizer."""
    detector = DetectorFactory.create(settings)
    normalizer = ScriptNormalizerFactory.create(settings)
    steps: list[PipelineStep] = [MarkProcessingStep(), DetectEncodingStep(detector)]
    if normalizer is not None:
        steps.append(NormalizeScriptStep(normalizer))
    steps.append(MarkFixedStep())
    return BatchFixer(steps=steps, failed_step=MarkFailedStep())
