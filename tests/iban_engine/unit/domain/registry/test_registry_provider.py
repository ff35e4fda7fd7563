"""Unit tests for the default registry hook and the domain layer boundary."""

import re
from pathlib import Path

import pytest

import iban_engine
from iban_engine.domain.iban import Iban
from iban_engine.domain.registry import install_registry_provider, resolve_registry
from iban_engine.infrastructure.registry import get_default_registry

DOMAIN_DIR = Path(iban_engine.__file__).parent / "domain"


@pytest.fixture
def restore_provider():
    """Reinstall the package default provider after the test."""
    yield
    install_registry_provider(get_default_registry)


class TestResolveRegistry:
    """Test resolving the registry used when none is passed."""

    def test_explicit_registry_wins(self, tiny_registry, restore_provider):
        """An explicit registry is returned without consulting the provider."""
        install_registry_provider(None)
        assert resolve_registry(tiny_registry) is tiny_registry

    def test_installed_provider_used(self, tiny_registry, restore_provider):
        """Without an argument the installed provider supplies the registry."""
        install_registry_provider(lambda: tiny_registry)

        assert resolve_registry() is tiny_registry
        assert Iban.from_bban("XX", "AB1234").country_code == "XX"

    def test_no_provider(self, restore_provider):
        """Without a provider a registry must be passed explicitly."""
        install_registry_provider(None)

        with pytest.raises(RuntimeError, match="pass a registry explicitly"):
            resolve_registry()

    def test_package_installs_default(self):
        """Importing the package wires the bundled registry."""
        assert resolve_registry() is get_default_registry()


class TestDomainBoundary:
    """The domain layer must not depend on outer layers."""

    def test_no_outer_layer_imports(self):
        """No domain module imports infrastructure, presentation or config."""
        outer = re.compile(
            r"^\s*(from|import)\s+"
            r"(iban_engine\.(infrastructure|presentation)|iban_config)\b",
            re.MULTILINE,
        )
        offenders = [
            str(path.relative_to(DOMAIN_DIR))
            for path in DOMAIN_DIR.rglob("*.py")
            if outer.search(path.read_text(encoding="utf-8"))
        ]

        assert offenders == []
