"""Visual variant rules shared by the code generator and the preview renderer."""

from dataclasses import dataclass

TRANSPARENT = "transparent"
OUTLINE_BORDER_WIDTH = 2


@dataclass(frozen=True)
class ButtonColors:
    """Resolved fill, label and border colors of a button."""

    fill: str
    text: str
    border: str | None = None


def button_colors(variant: str, background: str, text: str) -> ButtonColors:
    """
    Map a button variant onto concrete colors.

    ``solid`` fills with the background color and uses the text color.
    ``outline`` and ``ghost`` are transparent and draw the label in the
    background color; only ``outline`` gets a border.
    """
    match variant:
        case "outline":
            return ButtonColors(fill=TRANSPARENT, text=background, border=background)
        case "ghost":
            return ButtonColors(fill=TRANSPARENT, text=background)
        case _:
            return ButtonColors(fill=background, text=text)


HEADING_SIZES = {"h1": 32, "h2": 24, "h3": 20}


def heading_font_size(level: str) -> int:
    """Font size for a heading level (unknown levels fall back to h2)."""
    return HEADING_SIZES.get(level, HEADING_SIZES["h2"])


def progress_percent(current: float, total: float) -> int:
    """Completed share in whole percent, clamped to 0..100."""
    if total <= 0:
        return 0
    return max(0, min(100, round(current / total * 100)))
