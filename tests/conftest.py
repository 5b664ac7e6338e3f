"""Shared pytest fixtures for loadtok tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from loadtok.config.settings import LoadtokSettings
from loadtok.domain.registry import CapabilityRegistry, default_registry
from loadtok.services.decode import DecodeService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host LOADTOK_* variables out of every test."""
    monkeypatch.delenv("LOADTOK_CONFIG", raising=False)
    monkeypatch.delenv("LOADTOK_QUIET", raising=False)
    monkeypatch.delenv("LOADTOK_DECODE__DELIMITER", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> LoadtokSettings:
    """Default settings rooted at an empty temp directory."""
    return LoadtokSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def registry() -> CapabilityRegistry:
    """Registry with built-ins and the sample record types."""
    return default_registry()


@pytest.fixture
def decode_service(settings: LoadtokSettings, registry: CapabilityRegistry) -> DecodeService:
    return DecodeService(settings, registry)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI sees no loadtok.toml or plugins.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
