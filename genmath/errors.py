"""Fatal error kinds raised by the generation pipeline."""


class GeneratorError(RuntimeError):
    """Base class for errors that abort a generation run."""


class ResolutionError(GeneratorError):
    """Raised when the target Go package cannot be located."""


class ParseError(GeneratorError):
    """Raised when a source file of the target package fails to parse."""


class TemplateError(GeneratorError):
    """Raised when an output template cannot be loaded or rendered."""


class WriteError(GeneratorError):
    """Raised when an output module cannot be written to disk."""


__all__ = [
    "GeneratorError",
    "ParseError",
    "ResolutionError",
    "TemplateError",
    "WriteError",
]
