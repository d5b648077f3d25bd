"""
Built-in Component Kinds
The instruction set of the screen compiler: every placeable kind with its
default properties and inspector schema.
"""

from typing import Any

from .types import Category, ComponentKind, FieldDescriptor, FieldType, Option


def text(key: str, label: str, default: str, placeholder: str | None = None) -> FieldDescriptor:
    return FieldDescriptor(key=key, label=label, type=FieldType.TEXT, default_value=default, placeholder=placeholder)


def textarea(key: str, label: str, default: str) -> FieldDescriptor:
    return FieldDescriptor(key=key, label=label, type=FieldType.TEXTAREA, default_value=default)


def color(key: str, label: str, default: str) -> FieldDescriptor:
    return FieldDescriptor(key=key, label=label, type=FieldType.COLOR, default_value=default)


def boolean(key: str, label: str, default: bool) -> FieldDescriptor:
    return FieldDescriptor(key=key, label=label, type=FieldType.BOOLEAN, default_value=default)


def number(key: str, label: str, default: float, min: float | None = None, max: float | None = None) -> FieldDescriptor:
    return FieldDescriptor(key=key, label=label, type=FieldType.NUMBER, default_value=default, min=min, max=max)


def slider(key: str, label: str, default: float, min: float, max: float, step: float | None = None) -> FieldDescriptor:
    return FieldDescriptor(
        key=key, label=label, type=FieldType.SLIDER, default_value=default, min=min, max=max, step=step
    )


def select(key: str, label: str, default: Any, choices: list[tuple[str, Any]]) -> FieldDescriptor:
    return FieldDescriptor(
        key=key,
        label=label,
        type=FieldType.SELECT,
        default_value=default,
        options=tuple(Option(label=name, value=value) for name, value in choices),
    )


FONT_WEIGHTS = [("Normal", "400"), ("Medium", "500"), ("Semibold", "600"), ("Bold", "700")]
TEXT_ALIGN = [("Left", "left"), ("Center", "center"), ("Right", "right"), ("Justify", "justify")]


# ============================================================================
# Layout
# ============================================================================

CONTAINER = ComponentKind(
    id="container",
    name="Container",
    category=Category.LAYOUT,
    icon="Square",
    description="Flexible container that holds other components",
    accepts_children=True,
    default_properties={
        "backgroundColor": "#ffffff",
        "padding": 16,
        "margin": 8,
        "borderRadius": 8,
        "flexDirection": "column",
        "justifyContent": "flex-start",
        "alignItems": "stretch",
    },
    config_schema=(
        color("backgroundColor", "Background Color", "#ffffff"),
        slider("padding", "Padding", 16, 0, 50),
        slider("margin", "Margin", 8, 0, 50),
        slider("borderRadius", "Border Radius", 8, 0, 30),
        select("flexDirection", "Direction", "column", [("Column", "column"), ("Row", "row")]),
        select(
            "justifyContent",
            "Justify",
            "flex-start",
            [
                ("Start", "flex-start"),
                ("End", "flex-end"),
                ("Center", "center"),
                ("Space Between", "space-between"),
                ("Space Around", "space-around"),
                ("Space Evenly", "space-evenly"),
            ],
        ),
        select(
            "alignItems",
            "Align",
            "stretch",
            [("Start", "flex-start"), ("End", "flex-end"), ("Center", "center"), ("Stretch", "stretch")],
        ),
    ),
)

CARD = ComponentKind(
    id="card",
    name="Card",
    category=Category.LAYOUT,
    icon="Square",
    description="Card container with shadow and border",
    accepts_children=True,
    default_properties={
        "backgroundColor": "#ffffff",
        "borderRadius": 12,
        "padding": 16,
        "margin": 8,
        "elevation": 2,
        "borderWidth": 0,
        "borderColor": "#e5e7eb",
    },
    config_schema=(
        color("backgroundColor", "Background Color", "#ffffff"),
        slider("borderRadius", "Border Radius", 12, 0, 30),
        slider("padding", "Padding", 16, 0, 50),
        slider("elevation", "Shadow", 2, 0, 10),
        slider("borderWidth", "Border Width", 0, 0, 5),
        color("borderColor", "Border Color", "#e5e7eb"),
    ),
)

HEADER = ComponentKind(
    id="header",
    name="Header",
    category=Category.LAYOUT,
    icon="Monitor",
    description="Header bar with title and navigation buttons",
    default_properties={
        "title": "Header Title",
        "backgroundColor": "#2563eb",
        "textColor": "#ffffff",
        "height": 60,
        "showBackButton": False,
        "showMenuButton": True,
        "elevation": 4,
    },
    config_schema=(
        text("title", "Title", "Header Title"),
        color("backgroundColor", "Background Color", "#2563eb"),
        color("textColor", "Text Color", "#ffffff"),
        slider("height", "Height", 60, 40, 100),
        boolean("showBackButton", "Show Back Button", False),
        boolean("showMenuButton", "Show Menu Button", True),
        slider("elevation", "Shadow", 4, 0, 10),
    ),
)

# ============================================================================
# Input
# ============================================================================

BUTTON = ComponentKind(
    id="button",
    name="Button",
    category=Category.INPUT,
    icon="MousePointer",
    description="Interactive button with several styles",
    default_properties={
        "text": "Button",
        "backgroundColor": "#2563eb",
        "textColor": "#ffffff",
        "borderRadius": 8,
        "padding": 12,
        "fontSize": 16,
        "fontWeight": "600",
        "disabled": False,
        "fullWidth": False,
        "variant": "solid",
        "size": "medium",
    },
    config_schema=(
        text("text", "Text", "Button"),
        color("backgroundColor", "Background Color", "#2563eb"),
        color("textColor", "Text Color", "#ffffff"),
        slider("borderRadius", "Border Radius", 8, 0, 30),
        slider("padding", "Padding", 12, 4, 32),
        slider("fontSize", "Font Size", 16, 10, 24),
        select("fontWeight", "Font Weight", "600", FONT_WEIGHTS),
        select("variant", "Variant", "solid", [("Solid", "solid"), ("Outline", "outline"), ("Ghost", "ghost")]),
        select("size", "Size", "medium", [("Small", "small"), ("Medium", "medium"), ("Large", "large")]),
        boolean("fullWidth", "Full Width", False),
        boolean("disabled", "Disabled", False),
    ),
)

TEXT_INPUT = ComponentKind(
    id="textinput",
    name="Text Input",
    category=Category.INPUT,
    icon="Type",
    description="Single or multi-line text field",
    default_properties={
        "placeholder": "Enter text...",
        "value": "",
        "multiline": False,
        "numberOfLines": 1,
        "borderWidth": 1,
        "borderColor": "#d1d5db",
        "borderRadius": 8,
        "padding": 12,
        "fontSize": 16,
        "backgroundColor": "#ffffff",
        "textColor": "#374151",
        "placeholderColor": "#9ca3af",
    },
    config_schema=(
        text("placeholder", "Placeholder", "Enter text..."),
        boolean("multiline", "Multiline", False),
        number("numberOfLines", "Lines", 1, min=1, max=10),
        color("borderColor", "Border Color", "#d1d5db"),
        slider("borderRadius", "Border Radius", 8, 0, 20),
        slider("fontSize", "Font Size", 16, 12, 20),
        color("backgroundColor", "Background Color", "#ffffff"),
        color("textColor", "Text Color", "#374151"),
    ),
)

SWITCH = ComponentKind(
    id="switch",
    name="Switch",
    category=Category.INPUT,
    icon="ToggleLeft",
    description="Toggle switch for boolean values",
    default_properties={
        "value": False,
        "activeColor": "#2563eb",
        "inactiveColor": "#d1d5db",
        "size": "medium",
    },
    config_schema=(
        boolean("value", "Default Value", False),
        color("activeColor", "Active Color", "#2563eb"),
        color("inactiveColor", "Inactive Color", "#d1d5db"),
    ),
)

# ============================================================================
# Display
# ============================================================================

TEXT = ComponentKind(
    id="text",
    name="Text",
    category=Category.DISPLAY,
    icon="Type",
    description="Text element with styling options",
    default_properties={
        "content": "Sample Text",
        "fontSize": 16,
        "fontWeight": "400",
        "color": "#374151",
        "textAlign": "left",
        "lineHeight": 1.5,
        "marginTop": 0,
        "marginBottom": 0,
        "marginLeft": 0,
        "marginRight": 0,
    },
    config_schema=(
        textarea("content", "Content", "Sample Text"),
        slider("fontSize", "Font Size", 16, 10, 32),
        color("color", "Color", "#374151"),
        select("textAlign", "Text Align", "left", TEXT_ALIGN),
        select("fontWeight", "Font Weight", "400", FONT_WEIGHTS),
        slider("lineHeight", "Line Height", 1.5, 1, 3, step=0.1),
        number("marginTop", "Margin Top", 0, min=0),
        number("marginBottom", "Margin Bottom", 0, min=0),
    ),
)

HEADING = ComponentKind(
    id="heading",
    name="Heading",
    category=Category.DISPLAY,
    icon="Type",
    description="Section heading in three sizes",
    default_properties={
        "content": "Heading",
        "level": "h2",
        "color": "#111827",
        "textAlign": "left",
    },
    config_schema=(
        text("content", "Text", "Heading"),
        select("level", "Level", "h2", [("H1", "h1"), ("H2", "h2"), ("H3", "h3")]),
        color("color", "Color", "#111827"),
        select("textAlign", "Text Align", "left", TEXT_ALIGN),
    ),
)

PROGRESS = ComponentKind(
    id="progress",
    name="Progress Tracker",
    category=Category.DISPLAY,
    icon="BarChart",
    description="Progress bar with label and percentage",
    default_properties={
        "title": "Progress",
        "current": 3,
        "total": 10,
        "unit": "items",
        "color": "#16a34a",
        "trackColor": "#e5e7eb",
        "barHeight": 8,
        "showPercentage": True,
    },
    config_schema=(
        text("title", "Title", "Progress"),
        number("current", "Current Value", 3, min=0),
        number("total", "Total Value", 10, min=1),
        text("unit", "Unit", "items"),
        color("color", "Color", "#16a34a"),
        color("trackColor", "Track Color", "#e5e7eb"),
        slider("barHeight", "Bar Height", 8, 2, 24),
        boolean("showPercentage", "Show Percentage", True),
    ),
)

LIST = ComponentKind(
    id="list",
    name="List",
    category=Category.DISPLAY,
    icon="List",
    description="Scrollable list of titled rows",
    default_properties={
        "items": [
            {"id": "1", "title": "Item 1", "subtitle": "Description 1"},
            {"id": "2", "title": "Item 2", "subtitle": "Description 2"},
            {"id": "3", "title": "Item 3", "subtitle": "Description 3"},
        ],
        "itemHeight": 60,
        "showDivider": True,
        "dividerColor": "#e5e7eb",
        "backgroundColor": "#ffffff",
    },
    config_schema=(
        slider("itemHeight", "Item Height", 60, 40, 120),
        boolean("showDivider", "Show Divider", True),
        color("dividerColor", "Divider Color", "#e5e7eb"),
        color("backgroundColor", "Background Color", "#ffffff"),
    ),
)

# ============================================================================
# Navigation
# ============================================================================

TAB_BAR = ComponentKind(
    id="tabbar",
    name="Tab Bar",
    category=Category.NAVIGATION,
    icon="Navigation",
    description="Bottom tab bar with icons and labels",
    default_properties={
        "items": [
            {"label": "Home", "icon": "🏠"},
            {"label": "Search", "icon": "🔍"},
            {"label": "Profile", "icon": "👤"},
        ],
        "activeIndex": 0,
        "backgroundColor": "#ffffff",
        "activeColor": "#2563eb",
        "inactiveColor": "#6b7280",
        "showLabels": True,
        "height": 64,
    },
    config_schema=(
        number("activeIndex", "Active Tab", 0, min=0),
        color("backgroundColor", "Background Color", "#ffffff"),
        color("activeColor", "Active Color", "#2563eb"),
        color("inactiveColor", "Inactive Color", "#6b7280"),
        boolean("showLabels", "Show Labels", True),
        slider("height", "Height", 64, 48, 96),
    ),
)

# ============================================================================
# Media
# ============================================================================

IMAGE = ComponentKind(
    id="image",
    name="Image",
    category=Category.MEDIA,
    icon="Image",
    description="Remote image with resize options",
    default_properties={
        "source": "https://via.placeholder.com/300x200",
        "width": "100%",
        "height": 200,
        "borderRadius": 8,
        "resizeMode": "cover",
        "opacity": 1,
    },
    config_schema=(
        text("source", "Image URL", "https://via.placeholder.com/300x200"),
        slider("height", "Height", 200, 50, 500),
        slider("borderRadius", "Border Radius", 8, 0, 30),
        select(
            "resizeMode", "Resize Mode", "cover", [("Cover", "cover"), ("Contain", "contain"), ("Stretch", "stretch")]
        ),
        slider("opacity", "Opacity", 1, 0, 1, step=0.1),
    ),
)

VIDEO = ComponentKind(
    id="video",
    name="Video",
    category=Category.MEDIA,
    icon="Film",
    description="Video player with native controls",
    default_properties={
        "source": "https://example.com/video.mp4",
        "height": 200,
        "borderRadius": 8,
        "autoPlay": False,
        "loop": False,
        "showControls": True,
    },
    config_schema=(
        text("source", "Video URL", "https://example.com/video.mp4"),
        slider("height", "Height", 200, 100, 500),
        slider("borderRadius", "Border Radius", 8, 0, 30),
        boolean("autoPlay", "Auto Play", False),
        boolean("loop", "Loop", False),
        boolean("showControls", "Show Controls", True),
    ),
)


BUILTIN_KINDS: tuple[ComponentKind, ...] = (
    CONTAINER,
    CARD,
    HEADER,
    BUTTON,
    TEXT_INPUT,
    SWITCH,
    TEXT,
    HEADING,
    PROGRESS,
    LIST,
    TAB_BAR,
    IMAGE,
    VIDEO,
)
