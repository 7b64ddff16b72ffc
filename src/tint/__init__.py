from .attributes import ATTRIBUTES, AttributeSpec
from .color_mode import COLOR_MODE, ColorMode, detect_color_mode
from .styler import Styler, base_styler, derive
from .text import raw_len, strip

_base = base_styler()

# Foreground
black: Styler = _base.black
red: Styler = _base.red
green: Styler = _base.green
yellow: Styler = _base.yellow
blue: Styler = _base.blue
magenta: Styler = _base.magenta
cyan: Styler = _base.cyan
white: Styler = _base.white
grey: Styler = _base.grey
normal: Styler = _base.normal

# Background
bgBlack: Styler = _base.bgBlack
bgRed: Styler = _base.bgRed
bgGreen: Styler = _base.bgGreen
bgYellow: Styler = _base.bgYellow
bgBlue: Styler = _base.bgBlue
bgMagenta: Styler = _base.bgMagenta
bgCyan: Styler = _base.bgCyan
bgWhite: Styler = _base.bgWhite
bgGrey: Styler = _base.bgGrey

bg_black = bgBlack
bg_red = bgRed
bg_green = bgGreen
bg_yellow = bgYellow
bg_blue = bgBlue
bg_magenta = bgMagenta
bg_cyan = bgCyan
bg_white = bgWhite
bg_grey = bgGrey

# Styles
bold: Styler = _base.bold
dim: Styler = _base.dim
italic: Styler = _base.italic
underline: Styler = _base.underline
inverse: Styler = _base.inverse
hidden: Styler = _base.hidden
strikethrough: Styler = _base.strikethrough
reset: Styler = _base.reset

__all__ = [
    "ATTRIBUTES",
    "AttributeSpec",
    "COLOR_MODE",
    "ColorMode",
    "Styler",
    "base_styler",
    "derive",
    "detect_color_mode",
    "raw_len",
    "strip",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "grey",
    "normal",
    "bgBlack",
    "bgRed",
    "bgGreen",
    "bgYellow",
    "bgBlue",
    "bgMagenta",
    "bgCyan",
    "bgWhite",
    "bgGrey",
    "bg_black",
    "bg_red",
    "bg_green",
    "bg_yellow",
    "bg_blue",
    "bg_magenta",
    "bg_cyan",
    "bg_white",
    "bg_grey",
    "bold",
    "dim",
    "italic",
    "underline",
    "inverse",
    "hidden",
    "strikethrough",
    "reset",
]
