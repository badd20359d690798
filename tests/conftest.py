"""Shared fixtures for smallrye-info tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from smallrye_info import GenerationRequest, InfoExporter, InfoGenerator, ParsedVersion


@pytest.fixture
def generator() -> InfoGenerator:
    """Create an info generator."""
    return InfoGenerator()


@pytest.fixture
def exporter(generator: InfoGenerator) -> InfoExporter:
    """Create an info exporter using the generator fixture."""
    return InfoExporter(generator)


@pytest.fixture
def sample_request(tmp_path: Path) -> GenerationRequest:
    """Create a request for spec 1.0 and impl 2.3.1-SNAPSHOT."""
    return GenerationRequest(
        spec_version=ParsedVersion(1, 0, 0, False),
        impl_version=ParsedVersion(2, 3, 1, True),
        package_name="io.example.info",
        output_root=tmp_path / "generated",
    )


@pytest.fixture
def load_info_class() -> Callable[[str, str], type[Any]]:
    """Execute rendered source and return the class it defines."""

    def _load(source: str, class_name: str) -> type[Any]:
        namespace: dict[str, Any] = {}
        exec(compile(source, "<generated>", "exec"), namespace)  # noqa: S102
        return namespace[class_name]  # type: ignore[no-any-return]

    return _load
