"""Information class generation from parsed versions."""

import keyword
import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Final, NamedTuple, Self

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import OutputWriteError
from .parsed_version import ParsedVersion

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NAME: Final = "SmallRyeInfo"
DEFAULT_SOURCE_OUTPUT: Final = Path("build/generated-sources/smallrye-info")

INFO_VERSION: Final = 1
"""Version of the accessor set exposed by generated classes."""

_INDENT: Final = "    "


def _check_identifier(value: str, what: str) -> str:
    if not value.isidentifier() or keyword.iskeyword(value):
        raise ValueError(f"{what} {value!r} is not a valid Python identifier")
    return value


class GenerationRequest(BaseModel):
    """Everything needed to render one information class.

    Attributes:
        spec_version: Parsed specification version.
        impl_version: Parsed implementation version.
        package_name: Dotted name of the package the class is generated into.
        class_name: Name of the generated class.
        output_root: Root directory generated sources are written under.
    """

    model_config = ConfigDict(frozen=True)

    spec_version: ParsedVersion
    impl_version: ParsedVersion
    package_name: str
    class_name: str = DEFAULT_CLASS_NAME
    output_root: Path = DEFAULT_SOURCE_OUTPUT

    @field_validator("package_name")
    @classmethod
    def _validate_package_name(cls, value: str) -> str:
        if not value:
            raise ValueError("package name must not be empty")
        for segment in value.split("."):
            _check_identifier(segment, "Package segment")
        return value

    @field_validator("class_name")
    @classmethod
    def _validate_class_name(cls, value: str) -> str:
        if not value:
            raise ValueError("class name must not be empty")
        return _check_identifier(value, "Class name")

    @property
    def module_name(self: Self) -> str:
        """Name of the generated module, the snake-case form of the class name."""
        return to_module_name(self.class_name)

    @property
    def qualified_module_name(self: Self) -> str:
        """Fully qualified import path of the generated module."""
        return f"{self.package_name}.{self.module_name}"


class Accessor(NamedTuple):
    """A static accessor on the generated class."""

    name: str
    return_type: type
    summary: str
    returns: str
    value: Callable[[GenerationRequest], int | bool]


def _snapshot_returns(subject: str) -> str:
    return f"True if the {subject} is a snapshot, or False otherwise."


ACCESSORS: Final[tuple[Accessor, ...]] = (
    Accessor(
        "get_spec_major_version",
        int,
        "Get the specification major version.",
        "The specification major version.",
        lambda req: req.spec_version.major,
    ),
    Accessor(
        "get_spec_minor_version",
        int,
        "Get the specification minor version.",
        "The specification minor version.",
        lambda req: req.spec_version.minor,
    ),
    Accessor(
        "get_spec_micro_version",
        int,
        "Get the specification micro version.",
        "The specification micro version.",
        lambda req: req.spec_version.micro,
    ),
    Accessor(
        "is_spec_snapshot",
        bool,
        "Determine whether the specification is a snapshot.",
        _snapshot_returns("specification"),
        lambda req: req.spec_version.is_snapshot,
    ),
    Accessor(
        "get_impl_major_version",
        int,
        "Get the implementation major version.",
        "The implementation major version.",
        lambda req: req.impl_version.major,
    ),
    Accessor(
        "get_impl_minor_version",
        int,
        "Get the implementation minor version.",
        "The implementation minor version.",
        lambda req: req.impl_version.minor,
    ),
    Accessor(
        "get_impl_micro_version",
        int,
        "Get the implementation micro version.",
        "The implementation micro version.",
        lambda req: req.impl_version.micro,
    ),
    Accessor(
        "is_impl_snapshot",
        bool,
        "Determine whether the implementation is a snapshot.",
        _snapshot_returns("implementation"),
        lambda req: req.impl_version.is_snapshot,
    ),
    Accessor(
        "get_info_version",
        int,
        "Get the information class API version.\n\n"
        "Use this value to determine what methods are available on this class.",
        "The information class API version.",
        lambda req: INFO_VERSION,
    ),
)


def to_module_name(class_name: str) -> str:
    """Convert a class name to the snake-case module name it is written to.

    Args:
        class_name: Class name, e.g. "SmallRyeInfo".

    Returns:
        Module name, e.g. "small_rye_info".
    """
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", class_name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name).lower()
    if keyword.iskeyword(name):
        name += "_"
    return name


class InfoGenerator:
    """Renders the source of a final, non-instantiable information class."""

    def create_request(  # noqa: PLR0913
        self: Self,
        spec_version: str,
        implementation_version: str,
        package_name: str,
        class_name: str = DEFAULT_CLASS_NAME,
        output_root: str | Path = DEFAULT_SOURCE_OUTPUT,
    ) -> GenerationRequest:
        """Parse both version strings and build a generation request.

        Args:
            spec_version: Raw specification version.
            implementation_version: Raw implementation version.
            package_name: Package the class is generated into.
            class_name: Name of the generated class.
            output_root: Root directory for generated sources.

        Returns:
            A validated generation request.

        Raises:
            MalformedVersionError: If either version string is malformed.
            pydantic.ValidationError: If the package or class name is invalid.
        """
        spec = ParsedVersion.parse(spec_version, role="specification")
        impl = ParsedVersion.parse(implementation_version, role="implementation")
        return GenerationRequest(
            spec_version=spec,
            impl_version=impl,
            package_name=package_name,
            class_name=class_name,
            output_root=Path(output_root),
        )

    def render(self: Self, request: GenerationRequest) -> str:
        """Render the information module for a request.

        Rendering is deterministic: the same request always produces the same
        text.

        Args:
            request: The generation request.

        Returns:
            Python source code of the generated module.
        """
        name = request.class_name
        lines = [
            f'"""Version information for the {request.package_name} package."""',
            "",
            "# This file is auto-generated by smallrye-info. Do not edit manually.",
            "",
            "from typing import NoReturn, final",
            "",
            f'__all__ = ["{name}"]',
            "",
            "",
            "@final",
            f"class {name}:",
            f'{_INDENT}"""Information about the version of this module."""',
            "",
            f"{_INDENT}__slots__ = ()",
            "",
            f"{_INDENT}def __new__(cls) -> NoReturn:",
            f'{_INDENT * 2}raise TypeError("{name} cannot be instantiated")',
            "",
            f"{_INDENT}def __init_subclass__(cls, **kwargs: object) -> None:",
            f'{_INDENT * 2}raise TypeError("{name} cannot be subclassed")',
        ]

        for accessor in ACCESSORS:
            lines.append("")
            lines.extend(self._render_accessor(accessor, request))

        return "\n".join(lines) + "\n"

    def _render_accessor(
        self: Self, accessor: Accessor, request: GenerationRequest
    ) -> list[str]:
        """Render a single static accessor returning a constant."""
        body = _INDENT * 2
        lines = [
            f"{_INDENT}@staticmethod",
            f"{_INDENT}def {accessor.name}() -> {accessor.return_type.__name__}:",
        ]

        summary_lines = accessor.summary.split("\n")
        lines.append(f'{body}"""{summary_lines[0]}')
        lines.extend(f"{body}{line}" if line else "" for line in summary_lines[1:])
        lines.extend(
            [
                "",
                f"{body}Returns:",
                f"{body}{_INDENT}{accessor.returns}",
                f'{body}"""',
                f"{body}return {accessor.value(request)!r}",
            ]
        )
        return lines


class InfoExporter:
    """Write rendered information classes to a source tree."""

    def __init__(self: Self, generator: InfoGenerator | None = None) -> None:
        """Initialize the exporter.

        Args:
            generator: Generator used for rendering. A new one is created if not
                given.
        """
        self.generator = generator or InfoGenerator()

    def output_path(self: Self, request: GenerationRequest) -> Path:
        """Get the file the request's module is written to.

        Args:
            request: The generation request.

        Returns:
            Path of the generated module below the request's output root.
        """
        package_dir = request.output_root.joinpath(*request.package_name.split("."))
        return package_dir / f"{request.module_name}.py"

    def export(self: Self, request: GenerationRequest) -> Path:
        """Render a request and write it below its output root.

        Package directories are created as needed and receive an empty
        ``__init__.py`` if they do not have one, so the output root can be used
        as an import root.

        Args:
            request: The generation request.

        Returns:
            Path of the written module.

        Raises:
            OutputWriteError: If a directory or file could not be written.
        """
        source = self.generator.render(request)
        output_path = self.output_path(request)

        target = request.output_root
        try:
            for segment in request.package_name.split("."):
                target = target / segment
                target.mkdir(parents=True, exist_ok=True)
                init_file = target / "__init__.py"
                if not init_file.exists():
                    init_file.write_text("", encoding="utf-8")
            target = output_path
            output_path.write_text(source, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(target, str(e)) from e

        logger.info("Generated %s in %s", request.qualified_module_name, output_path)
        return output_path

    def generate(  # noqa: PLR0913
        self: Self,
        spec_version: str,
        implementation_version: str,
        package_name: str,
        class_name: str = DEFAULT_CLASS_NAME,
        output_root: str | Path = DEFAULT_SOURCE_OUTPUT,
    ) -> Path:
        """Parse versions, render the information class and write it.

        Nothing is written if either version string is malformed.

        Args:
            spec_version: Raw specification version.
            implementation_version: Raw implementation version.
            package_name: Package the class is generated into.
            class_name: Name of the generated class.
            output_root: Root directory for generated sources.

        Returns:
            Path of the written module.

        Raises:
            MalformedVersionError: If either version string is malformed.
            OutputWriteError: If the module could not be written.
        """
        request = self.generator.create_request(
            spec_version,
            implementation_version,
            package_name,
            class_name=class_name,
            output_root=output_root,
        )
        return self.export(request)
