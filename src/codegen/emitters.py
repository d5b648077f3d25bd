"""
Per-kind JSX emitters.

Each emitter turns one node into a JSX fragment, the style blocks it
references and the ``(module, name)`` imports it needs. Container kinds
receive their already-emitted children and nest them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from catalog.appearance import OUTLINE_BORDER_WIDTH, button_colors, heading_font_size, progress_percent
from canvas.model import CanvasNode
from canvas.values import PropertyBag
from .render import StyleBlock, indent, js_value, jsx_attr, jsx_text, style_ref
from .types import ExportFormat, ExportOptions

RN = "react-native"

Import = tuple[str, str]


@dataclass
class Emission:
    """Output of one emitter."""

    lines: list[str]
    styles: list[StyleBlock] = field(default_factory=list)
    imports: set[Import] = field(default_factory=set)


@dataclass(frozen=True)
class EmitContext:
    options: ExportOptions
    children: tuple[Emission, ...] = ()

    @property
    def expo(self) -> bool:
        return self.options.format == ExportFormat.EXPO


Emitter = Callable[[CanvasNode, PropertyBag, EmitContext], Emission]

_EMITTERS: dict[str, Emitter] = {}
_NESTING: set[str] = set()


def emitter(kind_id: str, nests: bool = False) -> Callable[[Emitter], Emitter]:
    """Register an emitter for a kind id."""

    def register(fn: Emitter) -> Emitter:
        _EMITTERS[kind_id] = fn
        if nests:
            _NESTING.add(kind_id)
        return fn

    return register


def get_emitter(kind_id: str) -> Emitter | None:
    return _EMITTERS.get(kind_id)


def nests_children(kind_id: str) -> bool:
    return kind_id in _NESTING


# ============================================================================
# Helpers
# ============================================================================


def _aux(prefix: str, node: CanvasNode) -> str:
    """Auxiliary style id, e.g. ``buttonText_<id>``."""
    return f"{prefix}_{node.id}"


def placeholder_style_id(node: CanvasNode) -> str:
    """Style id of an unknown-kind stand-in (the kind string may contain anything)."""
    return _aux("placeholder", node)


def _wrap(style: StyleBlock, ctx: EmitContext) -> Emission:
    """A View holding the node's children."""
    opening = f"<View style={{{style_ref(style.name)}}}"
    emission = Emission(lines=[], styles=[style], imports={(RN, "View")})
    if not ctx.children:
        emission.lines = [opening + " />"]
        return emission

    emission.lines.append(opening + ">")
    for child in ctx.children:
        emission.lines += indent(child.lines)
        emission.styles += child.styles
        emission.imports |= child.imports
    emission.lines.append("</View>")
    return emission


# ============================================================================
# Layout
# ============================================================================


@emitter("container", nests=True)
def emit_container(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    style = StyleBlock(node.style_id)
    style.add("backgroundColor", props.color("backgroundColor", "#ffffff"))
    style.add("padding", props.number("padding", 16))
    style.add("margin", props.number("margin", 8))
    style.add("borderRadius", props.number("borderRadius", 8))
    style.add("flexDirection", props.choice("flexDirection", "column"))
    style.add("justifyContent", props.choice("justifyContent", "flex-start"))
    style.add("alignItems", props.choice("alignItems", "stretch"))
    return _wrap(style, ctx)


@emitter("card", nests=True)
def emit_card(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    elevation = props.number("elevation", 2)
    style = StyleBlock(node.style_id)
    style.add("backgroundColor", props.color("backgroundColor", "#ffffff"))
    style.add("borderRadius", props.number("borderRadius", 12))
    style.add("padding", props.number("padding", 16))
    style.add("margin", props.number("margin", 8))
    style.add("elevation", elevation)
    if elevation > 0:
        style.add("shadowColor", "#000")
        style.add("shadowOffset", {"width": 0, "height": min(elevation, 4)})
        style.add("shadowOpacity", 0.1)
        style.add("shadowRadius", elevation * 2)
    border_width = props.number("borderWidth", 0)
    if border_width > 0:
        style.add("borderWidth", border_width)
        style.add("borderColor", props.color("borderColor", "#e5e7eb"))
    return _wrap(style, ctx)


@emitter("header")
def emit_header(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    text_color = props.color("textColor", "#ffffff")
    show_back = props.boolean("showBackButton", False)
    show_menu = props.boolean("showMenuButton", True)
    elevation = props.number("elevation", 4)

    style = StyleBlock(node.style_id)
    style.add("backgroundColor", props.color("backgroundColor", "#2563eb"))
    style.add("height", props.number("height", 60))
    style.add("flexDirection", "row")
    style.add("alignItems", "center")
    style.add("justifyContent", "space-between")
    style.add("paddingHorizontal", 16)
    style.add("elevation", elevation)
    title = StyleBlock(_aux("headerTitle", node))
    title.add("flex", 1)
    title.add("color", text_color)
    title.add("fontSize", 18)
    title.add("fontWeight", "600")
    title.add("textAlign", "center")

    emission = Emission(lines=[], styles=[style, title], imports={(RN, "View"), (RN, "Text")})
    button_ref = style_ref(_aux("headerButton", node))
    icon_ref = style_ref(_aux("headerIcon", node))

    def icon_button(icon: str, action: str) -> list[str]:
        return [
            f"<TouchableOpacity style={{{button_ref}}} onPress={{() => console.log({js_value(action)})}}>",
            f"  <Text style={{{icon_ref}}}>{icon}</Text>",
            "</TouchableOpacity>",
        ]

    body: list[str] = []
    if show_back:
        body += icon_button("←", "Back pressed")
    body.append(f"<Text style={{{style_ref(title.name)}}}>{jsx_text(props.text('title', 'Header Title'))}</Text>")
    if show_menu:
        body += icon_button("☰", "Menu pressed")

    if show_back or show_menu:
        emission.imports.add((RN, "TouchableOpacity"))
        emission.styles.append(StyleBlock(_aux("headerButton", node)).add("padding", 8))
        emission.styles.append(
            StyleBlock(_aux("headerIcon", node)).add("color", text_color).add("fontSize", 20)
        )

    emission.lines = [f"<View style={{{style_ref(style.name)}}}>", *indent(body), "</View>"]
    return emission


# ============================================================================
# Input
# ============================================================================

BUTTON_PADDING_X = {"small": 16, "medium": 24, "large": 32}


@emitter("button")
def emit_button(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    colors = button_colors(
        props.choice("variant", "solid"),
        props.color("backgroundColor", "#2563eb"),
        props.color("textColor", "#ffffff"),
    )
    disabled = props.boolean("disabled", False)

    style = StyleBlock(node.style_id)
    style.add("backgroundColor", colors.fill)
    style.add("borderRadius", props.number("borderRadius", 8))
    style.add("paddingVertical", props.number("padding", 12))
    style.add("paddingHorizontal", BUTTON_PADDING_X.get(props.choice("size", "medium"), 24))
    style.add("alignItems", "center")
    style.add("justifyContent", "center")
    style.add("margin", 4)
    if colors.border is not None:
        style.add("borderWidth", OUTLINE_BORDER_WIDTH)
        style.add("borderColor", colors.border)
    if props.boolean("fullWidth", False):
        style.add("width", "100%")
    if disabled:
        style.add("opacity", 0.5)

    label = StyleBlock(_aux("buttonText", node))
    label.add("color", colors.text)
    label.add("fontSize", props.number("fontSize", 16))
    label.add("fontWeight", props.choice("fontWeight", "600"))

    lines = [
        "<TouchableOpacity",
        f"  style={{{style_ref(style.name)}}}",
        f"  disabled={{{js_value(disabled)}}}",
        "  onPress={() => console.log('Button pressed')}",
        ">",
        f"  <Text style={{{style_ref(label.name)}}}>{jsx_text(props.text('text', 'Button'))}</Text>",
        "</TouchableOpacity>",
    ]
    return Emission(lines=lines, styles=[style, label], imports={(RN, "TouchableOpacity"), (RN, "Text")})


LINE_HEIGHT_PX = 24


@emitter("textinput")
def emit_text_input(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    multiline = props.boolean("multiline", False)
    lines_count = max(1, int(props.number("numberOfLines", 1)))

    style = StyleBlock(node.style_id)
    style.add("borderWidth", props.number("borderWidth", 1))
    style.add("borderColor", props.color("borderColor", "#d1d5db"))
    style.add("borderRadius", props.number("borderRadius", 8))
    style.add("padding", props.number("padding", 12))
    style.add("fontSize", props.number("fontSize", 16))
    style.add("backgroundColor", props.color("backgroundColor", "#ffffff"))
    style.add("color", props.color("textColor", "#374151"))
    style.add("margin", 4)
    if multiline:
        style.add("minHeight", lines_count * LINE_HEIGHT_PX)
        style.add("textAlignVertical", "top")

    lines = [
        "<TextInput",
        f"  style={{{style_ref(style.name)}}}",
        f"  placeholder={jsx_attr(props.text('placeholder', 'Enter text...'))}",
        f"  placeholderTextColor={jsx_attr(props.color('placeholderColor', '#9ca3af'))}",
    ]
    value = props.text("value", "")
    if value:
        lines.append(f"  defaultValue={jsx_attr(value)}")
    lines.append(f"  multiline={{{js_value(multiline)}}}")
    if multiline:
        lines.append(f"  numberOfLines={{{lines_count}}}")
    lines.append("/>")
    return Emission(lines=lines, styles=[style], imports={(RN, "TextInput")})


SWITCH_SCALE = {"small": 0.8, "medium": 1, "large": 1.2}


@emitter("switch")
def emit_switch(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    active = props.color("activeColor", "#2563eb")
    inactive = props.color("inactiveColor", "#d1d5db")

    style = StyleBlock(node.style_id)
    style.add("margin", 8)
    style.add("alignSelf", "flex-start")
    scale = SWITCH_SCALE.get(props.choice("size", "medium"), 1)
    if scale != 1:
        style.add("transform", [{"scale": scale}])

    lines = [
        "<Switch",
        f"  style={{{style_ref(style.name)}}}",
        f"  value={{{js_value(props.boolean('value', False))}}}",
        f"  trackColor={{{js_value({'false': inactive, 'true': active})}}}",
        "/>",
    ]
    return Emission(lines=lines, styles=[style], imports={(RN, "Switch")})


# ============================================================================
# Display
# ============================================================================


@emitter("text")
def emit_text(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    font_size = props.number("fontSize", 16)

    style = StyleBlock(node.style_id)
    style.add("fontSize", font_size)
    style.add("fontWeight", props.choice("fontWeight", "400"))
    style.add("color", props.color("color", "#374151"))
    style.add("textAlign", props.choice("textAlign", "left"))
    style.add("lineHeight", round(font_size * props.number("lineHeight", 1.5), 2))
    for key in ("marginTop", "marginBottom", "marginLeft", "marginRight"):
        style.add(key, props.number(key, 0))
    style.add("padding", 8)

    lines = [f"<Text style={{{style_ref(style.name)}}}>{jsx_text(props.text('content', 'Sample Text'))}</Text>"]
    return Emission(lines=lines, styles=[style], imports={(RN, "Text")})


@emitter("heading")
def emit_heading(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    font_size = heading_font_size(props.choice("level", "h2"))

    style = StyleBlock(node.style_id)
    style.add("fontSize", font_size)
    style.add("fontWeight", "700")
    style.add("color", props.color("color", "#111827"))
    style.add("textAlign", props.choice("textAlign", "left"))
    style.add("lineHeight", round(font_size * 1.25, 2))
    style.add("marginVertical", 8)

    content = jsx_text(props.text("content", "Heading"))
    lines = [f'<Text style={{{style_ref(style.name)}}} accessibilityRole="header">{content}</Text>']
    return Emission(lines=lines, styles=[style], imports={(RN, "Text")})


@emitter("progress")
def emit_progress(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    current = props.number("current", 3)
    total = props.number("total", 10)
    percent = progress_percent(current, total)
    bar_height = props.number("barHeight", 8)

    label = f"{js_value(current)}/{js_value(total)} {props.text('unit', 'items')}".strip()
    if props.boolean("showPercentage", True):
        label += f" ({percent}%)"

    ids = {part: _aux(f"progress{part}", node) for part in ("Header", "Title", "Value", "Track", "Fill")}
    styles = [
        StyleBlock(node.style_id).add("margin", 8),
        StyleBlock(ids["Header"])
        .add("flexDirection", "row")
        .add("justifyContent", "space-between")
        .add("marginBottom", 4),
        StyleBlock(ids["Title"]).add("fontSize", 14).add("fontWeight", "600").add("color", "#374151"),
        StyleBlock(ids["Value"]).add("fontSize", 12).add("color", "#6b7280"),
        StyleBlock(ids["Track"])
        .add("height", bar_height)
        .add("backgroundColor", props.color("trackColor", "#e5e7eb"))
        .add("borderRadius", bar_height / 2)
        .add("overflow", "hidden"),
        StyleBlock(ids["Fill"])
        .add("width", f"{percent}%")
        .add("height", "100%")
        .add("backgroundColor", props.color("color", "#16a34a")),
    ]
    ref = {part: style_ref(name) for part, name in ids.items()}
    lines = [
        f"<View style={{{style_ref(node.style_id)}}}>",
        f"  <View style={{{ref['Header']}}}>",
        f"    <Text style={{{ref['Title']}}}>{jsx_text(props.text('title', 'Progress'))}</Text>",
        f"    <Text style={{{ref['Value']}}}>{jsx_text(label)}</Text>",
        "  </View>",
        f"  <View style={{{ref['Track']}}}>",
        f"    <View style={{{ref['Fill']}}} />",
        "  </View>",
        "</View>",
    ]
    return Emission(lines=lines, styles=styles, imports={(RN, "View"), (RN, "Text")})


def _list_rows(items: list[dict[str, Any]]) -> list[dict[str, str]]:
    rows = []
    for index, item in enumerate(items, start=1):
        row = {"id": str(item.get("id", index)), "title": str(item.get("title", f"Item {index}"))}
        if item.get("subtitle"):
            row["subtitle"] = str(item["subtitle"])
        rows.append(row)
    return rows


@emitter("list")
def emit_list(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    show_divider = props.boolean("showDivider", True)
    ids = {part: _aux(f"list{part}", node) for part in ("Item", "Title", "Subtitle", "Divider")}

    styles = [
        StyleBlock(node.style_id).add("backgroundColor", props.color("backgroundColor", "#ffffff")),
        StyleBlock(ids["Item"])
        .add("minHeight", props.number("itemHeight", 60))
        .add("justifyContent", "center")
        .add("paddingHorizontal", 16),
        StyleBlock(ids["Title"]).add("fontSize", 16).add("color", "#111827"),
        StyleBlock(ids["Subtitle"]).add("fontSize", 13).add("color", "#6b7280").add("marginTop", 2),
    ]
    if show_divider:
        styles.append(
            StyleBlock(ids["Divider"]).add("height", 1).add("backgroundColor", props.color("dividerColor", "#e5e7eb"))
        )

    lines = [
        "<FlatList",
        f"  data={{{js_value(_list_rows(props.items('items')))}}}",
        "  keyExtractor={(item) => item.id}",
        "  scrollEnabled={false}",
        f"  style={{{style_ref(node.style_id)}}}",
    ]
    if show_divider:
        lines.append(f"  ItemSeparatorComponent={{() => <View style={{{style_ref(ids['Divider'])}}} />}}")
    lines += [
        "  renderItem={({ item }) => (",
        f"    <View style={{{style_ref(ids['Item'])}}}>",
        f"      <Text style={{{style_ref(ids['Title'])}}}>{{item.title}}</Text>",
        f"      {{item.subtitle ? <Text style={{{style_ref(ids['Subtitle'])}}}>{{item.subtitle}}</Text> : null}}",
        "    </View>",
        "  )}",
        "/>",
    ]
    return Emission(lines=lines, styles=styles, imports={(RN, "FlatList"), (RN, "View"), (RN, "Text")})


# ============================================================================
# Navigation
# ============================================================================


@emitter("tabbar")
def emit_tab_bar(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    active_index = int(props.number("activeIndex", 0))
    show_labels = props.boolean("showLabels", True)
    ids = {part: _aux(f"tabbar{part}", node) for part in ("Item", "Icon", "Active", "Inactive")}

    styles = [
        StyleBlock(node.style_id)
        .add("flexDirection", "row")
        .add("height", props.number("height", 64))
        .add("backgroundColor", props.color("backgroundColor", "#ffffff"))
        .add("borderTopWidth", 1)
        .add("borderTopColor", "#e5e7eb"),
        StyleBlock(ids["Item"]).add("flex", 1).add("alignItems", "center").add("justifyContent", "center"),
        StyleBlock(ids["Icon"]).add("fontSize", 20),
        StyleBlock(ids["Active"]).add("color", props.color("activeColor", "#2563eb")).add("fontSize", 12),
        StyleBlock(ids["Inactive"]).add("color", props.color("inactiveColor", "#6b7280")).add("fontSize", 12),
    ]

    body: list[str] = []
    for index, item in enumerate(props.items("items")):
        state = style_ref(ids["Active"] if index == active_index else ids["Inactive"])
        body.append(f"<TouchableOpacity style={{{style_ref(ids['Item'])}}}>")
        body.append(f"  <Text style={{{style_ref(ids['Icon'])}}}>{jsx_text(str(item.get('icon', '•')))}</Text>")
        if show_labels:
            body.append(f"  <Text style={{{state}}}>{jsx_text(str(item.get('label', f'Tab {index + 1}')))}</Text>")
        body.append("</TouchableOpacity>")

    opening = f"<View style={{{style_ref(node.style_id)}}}"
    lines = [opening + ">", *indent(body), "</View>"] if body else [opening + " />"]
    return Emission(lines=lines, styles=styles, imports={(RN, "View"), (RN, "Text"), (RN, "TouchableOpacity")})


# ============================================================================
# Media
# ============================================================================


@emitter("image")
def emit_image(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    style = StyleBlock(node.style_id)
    style.add("width", props.length("width", "100%"))
    style.add("height", props.length("height", 200))
    style.add("borderRadius", props.number("borderRadius", 8))
    style.add("opacity", props.number("opacity", 1))
    style.add("margin", 4)

    source = js_value({"uri": props.text("source", "")})
    mode = props.choice("resizeMode", "cover")
    if ctx.expo:
        fit = "fill" if mode == "stretch" else mode
        lines = [f'<Image source={{{source}}} style={{{style_ref(style.name)}}} contentFit="{fit}" />']
        return Emission(lines=lines, styles=[style], imports={("expo-image", "Image")})

    lines = [f'<Image source={{{source}}} style={{{style_ref(style.name)}}} resizeMode="{mode}" />']
    return Emission(lines=lines, styles=[style], imports={(RN, "Image")})


@emitter("video")
def emit_video(node: CanvasNode, props: PropertyBag, ctx: EmitContext) -> Emission:
    style = StyleBlock(node.style_id)
    style.add("width", "100%")
    style.add("height", props.number("height", 200))
    style.add("borderRadius", props.number("borderRadius", 8))
    style.add("backgroundColor", "#000")
    style.add("margin", 4)

    lines = [
        "<Video",
        f"  source={{{js_value({'uri': props.text('source', '')})}}}",
        f"  style={{{style_ref(style.name)}}}",
        f"  useNativeControls={{{js_value(props.boolean('showControls', True))}}}",
        f"  shouldPlay={{{js_value(props.boolean('autoPlay', False))}}}",
        f"  isLooping={{{js_value(props.boolean('loop', False))}}}",
        "  resizeMode={ResizeMode.CONTAIN}",
        "/>",
    ]
    return Emission(lines=lines, styles=[style], imports={("expo-av", "Video"), ("expo-av", "ResizeMode")})


# ============================================================================
# Unknown kinds
# ============================================================================


def emit_placeholder(node: CanvasNode) -> Emission:
    """Labeled stand-in for a kind no emitter knows."""
    style = StyleBlock(placeholder_style_id(node))
    style.add("padding", 16)
    style.add("margin", 4)
    style.add("backgroundColor", "#f3f4f6")
    style.add("borderWidth", 2)
    style.add("borderStyle", "dashed")
    style.add("borderColor", "#d1d5db")
    style.add("borderRadius", 8)
    style.add("alignItems", "center")

    lines = [
        f"<View style={{{style_ref(style.name)}}}>",
        f"  <Text>{jsx_text(f'Unknown Component: {node.kind}')}</Text>",
        "</View>",
    ]
    return Emission(lines=lines, styles=[style], imports={(RN, "View"), (RN, "Text")})
