"""Run scan, classify, build and emit in order."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .builder import build_model
from .classifier import Classifier
from .config import GeneratorConfig
from .emitter import Emitter
from .logging import get_logger
from .models import DeclarationModel
from .scanner import DeclarationScanner


@dataclass
class GenerationResult:
    """Outcome of a successful run."""

    model: DeclarationModel
    written: List[Path]

    @property
    def generic_count(self) -> int:
        return sum(1 for record in self.model.functions if record.is_generic)


class Generator:
    """Coordinates one full regeneration of the output modules.

    Each stage completes before the next starts. Any ``GeneratorError`` is
    fatal and propagates to the caller unchanged.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        scanner: DeclarationScanner | None = None,
        classifier: Classifier | None = None,
        emitter: Emitter | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.scanner = scanner or DeclarationScanner()
        self.classifier = classifier or Classifier(
            native_type=self.config.native_type,
            type_param=self.config.type_param,
        )
        self.emitter = emitter or Emitter(self.config)
        self.logger = get_logger("pipeline")

    def build(self) -> DeclarationModel:
        scan = self.scanner.scan(self.config.package)
        records = self.classifier.classify_all(scan.functions)
        for decl, record in zip(scan.functions, records):
            self.logger.debug(
                "%s: %s %s -> %s",
                decl.location,
                record.name,
                record.original_signature,
                "generic" if record.is_generic else "alias",
            )
        return build_model(records, scan)

    def run(self) -> GenerationResult:
        model = self.build()
        result = GenerationResult(model=model, written=[])
        self.logger.info(
            "Classified %d functions (%d generic, %d aliases)",
            len(model.functions),
            result.generic_count,
            len(model.functions) - result.generic_count,
        )
        result.written.extend(self.emitter.emit(model, self.config.output_dir))
        self.logger.info("Core files generated successfully.")
        return result


__all__ = ["GenerationResult", "Generator"]
