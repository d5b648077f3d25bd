"""Code generation: canvas documents to React Native / Expo source."""

from .types import AppSettings, ExportFormat, ExportOptions, FileKind, GeneratedCode, GeneratedFile
from .generator import CodeGenerator
from .emitters import emitter
from .scaffold import APP_CONFIG_PATH, HEADER_PATH, SCREEN_PATH, STYLES_PATH

__all__ = [
    "AppSettings",
    "ExportFormat",
    "ExportOptions",
    "FileKind",
    "GeneratedCode",
    "GeneratedFile",
    "CodeGenerator",
    "emitter",
    "APP_CONFIG_PATH",
    "HEADER_PATH",
    "SCREEN_PATH",
    "STYLES_PATH",
]
