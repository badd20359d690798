"""smallrye-info - generate static version information classes at build time.

Parses a specification version and an implementation version and renders a
final, non-instantiable class exposing their components as static accessors.
"""

from ._version import __version__
from .config import GeneratorSettings, load_settings
from .exceptions import (
    ConfigError,
    InfoGeneratorError,
    MalformedVersionError,
    OutputWriteError,
)
from .info_generator import (
    ACCESSORS,
    DEFAULT_CLASS_NAME,
    INFO_VERSION,
    GenerationRequest,
    InfoExporter,
    InfoGenerator,
)
from .parsed_version import VERSION_PATTERN, ParsedVersion

__all__ = [
    "ACCESSORS",
    "DEFAULT_CLASS_NAME",
    "INFO_VERSION",
    "VERSION_PATTERN",
    "ConfigError",
    "GenerationRequest",
    "GeneratorSettings",
    "InfoExporter",
    "InfoGenerator",
    "InfoGeneratorError",
    "MalformedVersionError",
    "OutputWriteError",
    "ParsedVersion",
    "__version__",
    "load_settings",
]
