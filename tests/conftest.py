"""Pytest configuration and fixtures."""

import os
import pytest

from core import configure_logging, create_container, get_settings
from catalog import Catalog, default_catalog
from canvas import MutationEngine
from canvas.model import CanvasNode, Document
from codegen import CodeGenerator, ExportOptions


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["BUILDER_LOG_LEVEL"] = "DEBUG"
    os.environ["BUILDER_ENABLE_CACHE"] = "false"  # Each test generates fresh
    configure_logging("DEBUG")


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def di_container():
    """Dependency injection container for testing."""
    return create_container()


@pytest.fixture
def catalog() -> Catalog:
    """Built-in component catalog."""
    return default_catalog()


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def engine(catalog, settings) -> MutationEngine:
    """Engine over an empty document."""
    return MutationEngine(catalog, settings=settings)


@pytest.fixture
def generator(catalog, settings) -> CodeGenerator:
    """Code generator (cache disabled by environment)."""
    return CodeGenerator(catalog, settings)


@pytest.fixture
def options() -> ExportOptions:
    return ExportOptions()


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def two_texts() -> Document:
    """Root list [t1, t2]."""
    return Document(
        title="Texts",
        nodes=[
            CanvasNode(id="t1", kind="text", properties={"content": "First"}),
            CanvasNode(id="t2", kind="text", properties={"content": "Second"}),
        ],
    )


@pytest.fixture
def nested_document() -> Document:
    """Container c1 holding button b1, followed by text t1."""
    return Document(
        title="Nested",
        nodes=[
            CanvasNode(
                id="c1",
                kind="container",
                properties={"padding": 16},
                children=[CanvasNode(id="b1", kind="button", properties={"text": "Go"})],
            ),
            CanvasNode(id="t1", kind="text", properties={"content": "Below"}),
        ],
    )


@pytest.fixture
def legacy_template() -> str:
    """Template in the legacy element format."""
    return """{
  "name": "Login",
  "category": "auth",
  "elements": [
    {
      "id": "element_1",
      "type": "header",
      "props": {"title": "Masuk", "showBackButton": true},
      "children": [],
      "position": {"x": 0, "y": 0},
      "size": {"width": "100%", "height": 60}
    },
    {
      "id": "element_2",
      "type": "card",
      "props": {"padding": 24},
      "children": [
        {"id": "element_3", "type": "textinput", "props": {"placeholder": "Email"}},
        {"id": "element_4", "type": "button", "props": {"text": "Login", "fullWidth": true}}
      ]
    }
  ]
}"""
