"""Shared pytest fixtures and test helpers for passmatch tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from passmatch.infrastructure.store import PasswordStore

# Layout of the sample store: (domain directory, credential file).
SAMPLE_ENTRIES: list[tuple[str, str]] = [
    ("foo.bar", "u1.gpg"),
    ("foo.bar", "u2.gpg"),
    ("baz.foo.bar", "u1.gpg"),
    ("domain.tld", "u1.gpg"),
    ("sub.domain.tld", "u1.gpg"),
    ("sub.sub.domain.tld", "u1.gpg"),
]


def add_entry(root: Path, domain: str, user: str, content: bytes = b"") -> Path:
    """Create ``root/domain/user`` with *content*, returning its path."""
    directory = root / domain
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / user
    path.write_bytes(content)
    return path


@pytest.fixture(autouse=True)
def _isolated_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep the developer's own store and config out of every test."""
    for var in ("PASSWORD_STORE_DIR", "PASSMATCH_STORE_DIR", "PASSMATCH_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    """Temporary password store populated with :data:`SAMPLE_ENTRIES`."""
    root = tmp_path / "password-store"
    root.mkdir()
    for domain, user in SAMPLE_ENTRIES:
        add_entry(root, domain, user, content=f"{domain}/{user}".encode())
    return root


@pytest.fixture
def store(store_root: Path) -> PasswordStore:
    """PasswordStore over the sample store."""
    return PasswordStore(store_root)
