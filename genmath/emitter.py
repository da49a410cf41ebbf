"""Render the declaration model into the four generated Go modules."""

from __future__ import annotations

from pathlib import Path
from typing import List

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .config import GeneratorConfig
from .errors import TemplateError, WriteError
from .logging import get_logger
from .models import DeclarationModel, OutputModule


def output_modules(config: GeneratorConfig) -> tuple[OutputModule, ...]:
    """Return the generated modules in emission order."""
    return (
        OutputModule("functions", config.functions_file, "functions.go.j2", "functions"),
        OutputModule("constants", config.constants_file, "constants.go.j2", "constants"),
        OutputModule("variables", config.variables_file, "variables.go.j2", "variables"),
        OutputModule("types", config.types_file, "types.go.j2", "types"),
    )


class Emitter:
    """Renders Jinja templates over the model and writes the results.

    Modules are rendered and written one at a time. A failure stops the run
    but leaves earlier modules on disk.
    """

    def __init__(self, config: GeneratorConfig | None = None, templates_dir: Path | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self.modules = output_modules(self.config)
        self.logger = get_logger("emitter")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, module: OutputModule, model: DeclarationModel) -> str:
        items = getattr(model, module.collection)
        try:
            template = self._env.get_template(module.template)
            return template.render(
                header=self.config.header,
                import_path=self.config.package,
                qualifier=self.config.qualifier,
                type_param=self.config.type_param,
                constraint=self.config.constraint,
                anchor=self.config.anchor,
                **{module.collection: items},
            )
        except jinja2.TemplateError as exc:
            raise TemplateError(
                f"failed to execute template {module.template} for {module.filename}: {exc}"
            ) from exc

    def emit(self, model: DeclarationModel, output_dir: Path | None = None) -> List[Path]:
        target_dir = output_dir or self.config.output_dir
        written: List[Path] = []
        for module in self.modules:
            text = self.render(module, model)
            path = target_dir / module.filename
            _write(path, text)
            self.logger.info("Wrote %s (%d %s)", path, len(getattr(model, module.collection)), module.name)
            written.append(path)
        return written


def _write(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
    except OSError as exc:
        raise WriteError(f"failed to create {path}: {exc}") from exc


__all__ = ["Emitter", "output_modules"]
