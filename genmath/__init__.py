"""Generator for generic wrappers around Go's standard math package."""

from .config import GeneratorConfig
from .errors import GeneratorError, ParseError, ResolutionError, TemplateError, WriteError
from .pipeline import Generator

__all__ = [
    "Generator",
    "GeneratorConfig",
    "GeneratorError",
    "ParseError",
    "ResolutionError",
    "TemplateError",
    "WriteError",
]
