# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color definitions for Fli terminal output.

`OneColors` holds hex color strings usable anywhere Rich accepts a style.
Style variants are derived on attribute access by suffix:

- `_b`: bold
- `_i`: italic
- `_u`: underline

    console.print("error", style=OneColors.DARK_RED_b)  # "bold #BE5046"
"""
from rich.style import Style
from rich.theme import Theme

_SUFFIXES = {"_b": "bold", "_i": "italic", "_u": "underline"}


class ColorsMeta(type):
    """Metaclass resolving `<COLOR>_<suffix>` attributes to Rich style strings."""

    def __getattr__(cls, name: str) -> str:
        for suffix, modifier in _SUFFIXES.items():
            if name.endswith(suffix):
                base = name[: -len(suffix)]
                color = cls.__dict__.get(base)
                if isinstance(color, str):
                    return f"{modifier} {color}"
        raise AttributeError(f"'{cls.__name__}' has no color named '{name}'")


class OneColors(metaclass=ColorsMeta):
    """Palette based on the One Dark color scheme."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    LIGHT_RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_one_theme() -> Theme:
    """Return a Rich theme exposing the palette under semantic names."""
    return Theme(
        {
            "fli.usage": Style.parse(OneColors.LIGHT_YELLOW_b),
            "fli.heading": Style.parse(OneColors.CYAN_b),
            "fli.flag": Style.parse(OneColors.GREEN),
            "fli.command": Style.parse(OneColors.BLUE_b),
            "fli.error": Style.parse(OneColors.DARK_RED_b),
            "fli.hint": Style.parse(OneColors.LIGHT_YELLOW),
            "fli.dim": Style.parse(OneColors.COMMENT_GREY),
        }
    )
