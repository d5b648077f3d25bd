"""
Code Generation Engine
Compiles a canvas document into a React Native / Expo project slice.
"""

from catalog import Catalog
from canvas.model import CanvasNode, Document, walk
from canvas.values import PropertyBag
from core import LogContext, Settings, get_logger, get_settings
from core.errors import DegradedNode, GenerationDegraded
from core.id import new_generation_id
from core.validate import DocumentValidator
from . import scaffold
from .cache import GenerationCache, fingerprint
from .emitters import (
    RN,
    EmitContext,
    Emission,
    emit_placeholder,
    get_emitter,
    nests_children,
    placeholder_style_id,
)
from .render import StyleBlock, minify_code
from .types import ExportFormat, ExportOptions, FileKind, GeneratedCode, GeneratedFile

logger = get_logger(__name__)


class CodeGenerator:
    """
    Document to source compiler.

    Generation is pure: the same document and options always produce the same
    bundle. Nodes whose kind has no emitter are emitted as placeholders and
    reported in ``GeneratedCode.warnings`` rather than failing the export.
    """

    def __init__(self, catalog: Catalog, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.catalog = catalog
        self.max_depth = settings.max_tree_depth
        self.default_format = ExportFormat(settings.default_format)
        self.cache = (
            GenerationCache(max_size=settings.cache_size, ttl_seconds=settings.cache_ttl)
            if settings.enable_cache
            else None
        )

    def generate(self, document: Document, options: ExportOptions | None = None) -> GeneratedCode:
        """
        Generate source files for a document.

        Raises:
            InvalidDocument: If the document violates structural invariants
            GenerationDegraded: In strict mode, if any node fell back to a placeholder
        """
        options = options or ExportOptions(format=self.default_format)
        snapshot = document.snapshot()
        DocumentValidator(self.max_depth).validate(snapshot.model_dump())

        key = fingerprint(snapshot, options) if self.cache is not None else None
        code = self.cache.get(key) if self.cache is not None else None
        if code is None:
            with LogContext(generation=new_generation_id(), document=snapshot.title):
                code = self._generate(snapshot, options)
            if self.cache is not None:
                self.cache.set(key, code)
        else:
            logger.debug("cache_hit", title=snapshot.title)

        if options.strict and code.warnings:
            raise GenerationDegraded(code.warnings)
        return code

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _emit(self, node: CanvasNode, options: ExportOptions, degraded: list[DegradedNode]) -> Emission:
        emit = get_emitter(node.kind)
        kind = self.catalog.get(node.kind)
        if emit is None or kind is None:
            degraded.append(DegradedNode(node_id=node.id, kind=node.kind, style_id=placeholder_style_id(node)))
            logger.warning("unknown_kind_placeholder", node_id=node.id, kind=node.kind)
            return emit_placeholder(node)

        children: tuple[Emission, ...] = ()
        if nests_children(node.kind):
            children = tuple(self._emit(child, options, degraded) for child in node.children)
        elif node.children:
            logger.debug("children_ignored", node_id=node.id, kind=node.kind, count=len(node.children))
        return emit(node, PropertyBag(kind, node.properties), EmitContext(options=options, children=children))

    def _generate(self, document: Document, options: ExportOptions) -> GeneratedCode:
        degraded: list[DegradedNode] = []
        fragments: list[str] = []
        styles: list[StyleBlock] = []
        imports: set[tuple[str, str]] = set()
        for node in document.nodes:
            emission = self._emit(node, options, degraded)
            fragments += emission.lines
            styles += emission.styles
            imports |= emission.imports

        files = [
            GeneratedFile(
                path=f"{scaffold.SCREEN_PATH}.{options.extension}",
                content=scaffold.screen_file(fragments, imports, styles, options),
                kind=FileKind.SCREEN,
            )
        ]
        if options.separate_stylesheet:
            files.append(
                GeneratedFile(
                    path=f"{scaffold.STYLES_PATH}.{options.module_extension}",
                    content=scaffold.stylesheet_file(styles, options),
                    kind=FileKind.STYLE,
                )
            )
        if any(node.kind == "header" for node in walk(document.nodes)):
            files.append(
                GeneratedFile(
                    path=f"{scaffold.HEADER_PATH}.{options.extension}",
                    content=scaffold.header_component(options),
                    kind=FileKind.COMPONENT,
                )
            )
        if options.minify:
            files = [f.model_copy(update={"content": minify_code(f.content)}) for f in files]
        files.append(
            GeneratedFile(path=scaffold.APP_CONFIG_PATH, content=scaffold.app_config(options), kind=FileKind.CONFIG)
        )

        dependencies = self._dependencies(imports, options)
        code = GeneratedCode(
            files=files,
            dependencies=dependencies,
            instructions=scaffold.instructions(options, dependencies),
            warnings=degraded,
        )
        logger.info(
            "generation_complete",
            format=options.format.value,
            nodes=document.count(),
            files=len(files),
            dependencies=len(dependencies),
            degraded=len(degraded),
        )
        return code

    @staticmethod
    def _dependencies(imports: set[tuple[str, str]], options: ExportOptions) -> list[str]:
        """Packages implied by the imports actually emitted."""
        packages = set(scaffold.BASE_DEPENDENCIES)
        packages |= {module for module, _ in imports if module != RN and not module.startswith(".")}
        if options.format == ExportFormat.EXPO:
            packages |= set(scaffold.EXPO_DEPENDENCIES)
        return sorted(packages)


__all__ = ["CodeGenerator"]
