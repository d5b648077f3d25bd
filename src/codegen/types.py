"""Code Generation Data Models."""

import re
from enum import Enum
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from core.errors import DegradedNode


class ExportFormat(str, Enum):
    """Target project flavour."""

    REACT_NATIVE = "react-native"
    EXPO = "expo"


class FileKind(str, Enum):
    SCREEN = "screen"
    STYLE = "style"
    COMPONENT = "component"
    CONFIG = "config"


class AppSettings(BaseModel):
    """App-level values written into the configuration file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="Generated App", min_length=1)
    version: str = Field(default="1.0.0")
    orientation: Literal["portrait", "landscape", "default"] = "portrait"
    background_color: str = Field(default="#ffffff")
    primary_color: str = Field(default="#2563eb")

    @property
    def slug(self) -> str:
        slug = re.sub(r"[^a-z0-9]+", "-", self.name.lower()).strip("-")
        return slug or "generated-app"

    @property
    def component_name(self) -> str:
        """PascalCase app name for the React Native registry."""
        words = re.findall(r"[A-Za-z0-9]+", self.name)
        name = "".join(word[:1].upper() + word[1:] for word in words)
        return name if name and not name[0].isdigit() else f"App{name}"


class ExportOptions(BaseModel):
    """Generation switches."""

    model_config = ConfigDict(frozen=True)

    format: ExportFormat = ExportFormat.REACT_NATIVE
    separate_stylesheet: bool = True
    minify: bool = False
    typescript: bool = True
    strict: bool = False
    app: AppSettings = Field(default_factory=AppSettings)

    @property
    def extension(self) -> str:
        return "tsx" if self.typescript else "js"

    @property
    def module_extension(self) -> str:
        return "ts" if self.typescript else "js"


class GeneratedFile(BaseModel):
    path: str
    content: str
    kind: FileKind


class GeneratedCode(BaseModel):
    """Export bundle: files, runtime dependencies and setup steps."""

    files: list[GeneratedFile] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    warnings: list[DegradedNode] = Field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)

    def file(self, path: str) -> GeneratedFile | None:
        return next((f for f in self.files if f.path == path), None)

    def files_of(self, kind: FileKind) -> list[GeneratedFile]:
        return [f for f in self.files if f.kind == kind]
