"""Text styles used when rendering tree lines."""

from enum import Enum

from rich.style import Style


class TextStyle(str, Enum):
    """How a piece of tree text is rendered.

    Values:
        PLAIN: Text is emitted unchanged
        DIMMED: Text is visually de-emphasized (ANSI faint)
    """

    PLAIN = "plain"
    DIMMED = "dimmed"


class Styler:
    """Renders text in a given TextStyle.

    Dimmed text is produced by rich, which wraps it in the ANSI "faint" attribute
    followed by a reset.

    Example:
        >>> styler = Styler()
        >>> styler.render("target", TextStyle.PLAIN)
        'target'
        >>> styler.render("target", TextStyle.DIMMED)
        '\\x1b[2mtarget\\x1b[0m'
    """

    def __init__(self) -> None:
        self._dim = Style(dim=True)

    def render(self, text: str, style: TextStyle) -> str:
        if style is TextStyle.DIMMED:
            return self._dim.render(text)
        return text
