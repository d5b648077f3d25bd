"""Tests for the dependency injection container."""

import pytest

from blueprint import InMemoryTemplateStore, TemplateStore
from canvas import MutationEngine
from catalog import Catalog
from codegen import CodeGenerator
from core import create_container
from core.config import Settings


@pytest.mark.unit
class TestContainer:
    """Wiring of builder services."""

    def test_singletons(self, di_container):
        assert di_container.get(Catalog) is di_container.get(Catalog)
        assert di_container.get(CodeGenerator) is di_container.get(CodeGenerator)
        assert di_container.get(TemplateStore) is di_container.get(TemplateStore)

    def test_template_store(self, di_container):
        assert isinstance(di_container.get(TemplateStore), InMemoryTemplateStore)

    def test_fresh_engines(self, di_container):
        first = di_container.get(MutationEngine)
        second = di_container.get(MutationEngine)
        assert first is not second
        assert first.catalog is di_container.get(Catalog)

    def test_custom_settings(self):
        settings = Settings(default_format="expo", enable_cache=True)
        container = create_container(settings)
        assert container.get(Settings) is settings
        generator = container.get(CodeGenerator)
        assert generator.default_format.value == "expo"
        assert generator.cache is not None
