"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from blueprint import DocumentParser, InMemoryTemplateStore, TemplateStore
from canvas import MutationEngine
from catalog import Catalog, default_catalog
from codegen import CodeGenerator
from .config import Settings, get_settings
from .logging_config import configure_logging


class BuilderModule(Module):
    """Builder dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_catalog(self) -> Catalog:
        """Provide the built-in component catalog."""
        return default_catalog()

    @singleton
    @provider
    def provide_code_generator(self, catalog: Catalog, settings: Settings) -> CodeGenerator:
        return CodeGenerator(catalog, settings)

    @singleton
    @provider
    def provide_template_store(self, settings: Settings) -> TemplateStore:
        parser = DocumentParser(max_bytes=settings.max_document_bytes, max_depth=settings.max_tree_depth)
        return InMemoryTemplateStore(parser)

    @provider
    def provide_engine(self, catalog: Catalog, settings: Settings) -> MutationEngine:
        """Fresh editing session per request."""
        return MutationEngine(catalog, settings=settings)


def create_container(settings: Settings | None = None) -> Injector:
    """Configure logging and create the injector."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    return Injector([BuilderModule(settings)])
