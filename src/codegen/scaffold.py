"""
Project Scaffold
Screen shell, stylesheet module, shared header component, app config and
setup instructions around the emitted fragments.
"""

from catalog.appearance import TRANSPARENT
from core.json import dumps_compact, dumps_pretty
from .render import INDENT, StyleBlock, indent, js_value, render_styles
from .types import ExportFormat, ExportOptions

SCREEN_NAME = "GeneratedScreen"
SCREEN_PATH = "src/screens/GeneratedScreen"
STYLES_PATH = "src/styles/GeneratedStyles"
HEADER_PATH = "src/components/CustomHeader"
APP_CONFIG_PATH = "app.json"

BASE_DEPENDENCIES = ("react", "react-native")
EXPO_DEPENDENCIES = ("expo", "expo-status-bar")

# Fragments sit inside return ( <SafeAreaView> <ScrollView> ... ).
FRAGMENT_DEPTH = 4


def base_styles(options: ExportOptions) -> list[StyleBlock]:
    return [
        StyleBlock("container").add("flex", 1).add("backgroundColor", options.app.background_color),
        StyleBlock("scrollContent").add("padding", 16).add("flexGrow", 1),
    ]


def render_imports(imports: set[tuple[str, str]]) -> list[str]:
    """``import { A, B } from 'module';`` lines, react-native first."""
    modules: dict[str, set[str]] = {}
    for module, name in imports:
        modules.setdefault(module, set()).add(name)

    def order(module: str) -> tuple[int, str]:
        if module == "react-native":
            return (0, module)
        return (2 if module.startswith(".") else 1, module)

    return [
        f"import {{ {', '.join(sorted(modules[module]))} }} from {js_value(module)};"
        for module in sorted(modules, key=order)
    ]


def screen_file(
    fragments: list[str],
    imports: set[tuple[str, str]],
    styles: list[StyleBlock],
    options: ExportOptions,
) -> str:
    """The screen component source."""
    imports = set(imports) | {("react-native", "SafeAreaView"), ("react-native", "ScrollView")}
    if options.separate_stylesheet:
        imports.add(("../styles/GeneratedStyles", "styles"))
    else:
        imports.add(("react-native", "StyleSheet"))
    if options.format == ExportFormat.EXPO:
        imports.add(("expo-status-bar", "StatusBar"))

    component_type = ": React.FC" if options.typescript else ""
    lines = [
        "import React from 'react';",
        *render_imports(imports),
        "",
        f"const {SCREEN_NAME}{component_type} = () => {{",
        "  return (",
        "    <SafeAreaView style={styles.container}>",
    ]
    if options.format == ExportFormat.EXPO:
        lines.append('      <StatusBar style="auto" />')
    lines.append("      <ScrollView contentContainerStyle={styles.scrollContent}>")
    lines += indent(fragments, FRAGMENT_DEPTH)
    lines += ["      </ScrollView>", "    </SafeAreaView>", "  );", "};", ""]

    if not options.separate_stylesheet:
        lines += ["const styles = StyleSheet.create({", *render_styles(base_styles(options) + styles), "});", ""]

    lines.append(f"export default {SCREEN_NAME};")
    return "\n".join(lines) + "\n"


def stylesheet_file(styles: list[StyleBlock], options: ExportOptions) -> str:
    lines = [
        "import { StyleSheet } from 'react-native';",
        "",
        "export const styles = StyleSheet.create({",
        *render_styles(base_styles(options) + styles),
        "});",
        "",
        "export default styles;",
    ]
    return "\n".join(lines) + "\n"


def header_component(options: ExportOptions) -> str:
    """Reusable header the screen's header markup can be swapped for."""
    primary = options.app.primary_color
    if options.typescript:
        props_type = [
            "interface CustomHeaderProps {",
            "  title: string;",
            "  showBackButton?: boolean;",
            "  showMenuButton?: boolean;",
            "  onBackPress?: () => void;",
            "  onMenuPress?: () => void;",
            "}",
            "",
        ]
        signature = "const CustomHeader: React.FC<CustomHeaderProps> = ({"
    else:
        props_type = []
        signature = "const CustomHeader = ({"

    styles = [
        StyleBlock("header")
        .add("height", 60)
        .add("flexDirection", "row")
        .add("alignItems", "center")
        .add("justifyContent", "space-between")
        .add("paddingHorizontal", 16)
        .add("backgroundColor", primary),
        StyleBlock("title")
        .add("flex", 1)
        .add("color", "#ffffff")
        .add("fontSize", 18)
        .add("fontWeight", "600")
        .add("textAlign", "center"),
        StyleBlock("button").add("padding", 8).add("backgroundColor", TRANSPARENT),
        StyleBlock("icon").add("color", "#ffffff").add("fontSize", 20),
    ]
    lines = [
        "import React from 'react';",
        "import { StyleSheet, Text, TouchableOpacity, View } from 'react-native';",
        "",
        *props_type,
        signature,
        "  title,",
        "  showBackButton = false,",
        "  showMenuButton = true,",
        "  onBackPress,",
        "  onMenuPress,",
        "}) => (",
        "  <View style={styles.header}>",
        "    {showBackButton && (",
        "      <TouchableOpacity style={styles.button} onPress={onBackPress}>",
        "        <Text style={styles.icon}>←</Text>",
        "      </TouchableOpacity>",
        "    )}",
        "    <Text style={styles.title}>{title}</Text>",
        "    {showMenuButton && (",
        "      <TouchableOpacity style={styles.button} onPress={onMenuPress}>",
        "        <Text style={styles.icon}>☰</Text>",
        "      </TouchableOpacity>",
        "    )}",
        "  </View>",
        ");",
        "",
        "const styles = StyleSheet.create({",
        *render_styles(styles),
        "});",
        "",
        "export default CustomHeader;",
    ]
    return "\n".join(lines) + "\n"


def app_config(options: ExportOptions) -> str:
    """``app.json`` in the shape each project flavour expects."""
    app = options.app
    if options.format == ExportFormat.EXPO:
        config = {
            "expo": {
                "name": app.name,
                "slug": app.slug,
                "version": app.version,
                "orientation": app.orientation,
                "icon": "./assets/icon.png",
                "userInterfaceStyle": "light",
                "splash": {
                    "image": "./assets/splash.png",
                    "resizeMode": "contain",
                    "backgroundColor": app.background_color,
                },
                "assetBundlePatterns": ["**/*"],
                "ios": {"supportsTablet": True},
                "android": {
                    "adaptiveIcon": {
                        "foregroundImage": "./assets/adaptive-icon.png",
                        "backgroundColor": app.background_color,
                    }
                },
                "web": {"favicon": "./assets/favicon.png"},
            }
        }
    else:
        config = {"name": app.component_name, "displayName": app.name}

    if options.minify:
        return dumps_compact(config)
    return dumps_pretty(config, indent=len(INDENT)) + "\n"


def instructions(options: ExportOptions, dependencies: list[str]) -> list[str]:
    extra = [dep for dep in dependencies if dep not in BASE_DEPENDENCIES + EXPO_DEPENDENCIES]
    if options.format == ExportFormat.EXPO:
        steps = [f"Create a new Expo project: npx create-expo-app {options.app.slug}"]
        install = [dep for dep in dependencies if dep not in BASE_DEPENDENCIES]
        steps.append(f"Install dependencies: npx expo install {' '.join(install)}")
        steps += [
            "Copy the generated src/ folder and app.json into the project root",
            f"Render {SCREEN_NAME} from App.{'tsx' if options.typescript else 'js'}",
            "Start the development server: npx expo start",
        ]
        return steps

    steps = [f"Create a new React Native project: npx @react-native-community/cli init {options.app.component_name}"]
    if extra:
        steps.append(f"Install dependencies: npm install {' '.join(extra)}")
    steps += [
        "Copy the generated src/ folder and app.json into the project root",
        f"Import {SCREEN_NAME} from {SCREEN_PATH} and register it in your navigator",
        "Run the app: npx react-native run-android or npx react-native run-ios",
    ]
    return steps
