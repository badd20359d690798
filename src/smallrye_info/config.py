"""Loading generator settings from TOML configuration files."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import ConfigError
from .info_generator import DEFAULT_CLASS_NAME, DEFAULT_SOURCE_OUTPUT

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final = "smallrye-info.toml"
PYPROJECT_FILENAME: Final = "pyproject.toml"
TOOL_KEY: Final = "smallrye-info"


class GeneratorSettings(BaseModel):
    """Resolved settings for one generator run.

    Attributes:
        spec_version: Raw specification version.
        implementation_version: Raw implementation version.
        package_name: Package the information class is generated into.
        class_name: Name of the information class.
        source_output: Root directory for generated sources.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    spec_version: str
    implementation_version: str
    package_name: str
    class_name: str = DEFAULT_CLASS_NAME
    source_output: Path = DEFAULT_SOURCE_OUTPUT


def find_config_file(directory: Path | None = None) -> Path | None:
    """Find the configuration file for a project directory.

    A standalone smallrye-info.toml takes precedence over pyproject.toml.

    Args:
        directory: Directory to search. Defaults to the current directory.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    directory = directory or Path.cwd()
    for filename in (CONFIG_FILENAME, PYPROJECT_FILENAME):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _extract_section(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    """Get the generator table from parsed TOML data."""
    if path.name == PYPROJECT_FILENAME:
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool] in {path} must be a table")
        section = tool.get(TOOL_KEY, {})
    else:
        section = data.get(TOOL_KEY, {})

    if not isinstance(section, dict):
        raise ConfigError(f"[{TOOL_KEY}] in {path} must be a table")

    return {key.replace("-", "_"): value for key, value in section.items()}


def _project_version(directory: Path) -> str | None:
    """Get [project].version from the pyproject.toml in a directory, if any."""
    pyproject = directory / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return None

    project = _read_toml(pyproject).get("project", {})
    if not isinstance(project, dict):
        raise ConfigError(f"[project] in {pyproject} must be a table")

    version = project.get("version")
    return version if isinstance(version, str) else None


def load_settings(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> GeneratorSettings:
    """Load generator settings.

    Values from the configuration file are overridden by non-None entries of
    ``overrides``. A relative ``source_output`` from the file is resolved against
    the file's directory. When no implementation version is configured, the host
    project's ``[project].version`` is used.

    Args:
        config_path: Explicit configuration file. If None, the current directory
            is searched.
        overrides: Values taking precedence over the file, e.g. from the command
            line.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If the configuration cannot be read or is invalid.
    """
    values: dict[str, Any] = {}

    if config_path is None:
        config_path = find_config_file()
    base_dir = config_path.parent if config_path else Path.cwd()

    if config_path is not None:
        logger.debug("Loading configuration from %s", config_path)
        values = _extract_section(config_path, _read_toml(config_path))
        if "source_output" in values:
            source_output = Path(values["source_output"])
            if not source_output.is_absolute():
                values["source_output"] = base_dir / source_output

    values.update(
        {key: value for key, value in (overrides or {}).items() if value is not None}
    )

    if values.get("implementation_version") is None:
        project_version = _project_version(base_dir)
        if project_version is not None:
            logger.debug("Using project version %s", project_version)
            values["implementation_version"] = project_version

    try:
        return GeneratorSettings.model_validate(values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
