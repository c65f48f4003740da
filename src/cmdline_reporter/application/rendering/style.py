"""Color and weight decoration as a rich Style."""

from __future__ import annotations

from rich.color import ColorParseError
from rich.errors import StyleSyntaxError
from rich.style import Style

from cmdline_reporter.domain.exceptions import InvalidColorError


def build_style(color: str | None, bold: bool) -> Style | None:
    """Compose color then bold into one Style. None = undecorated.

    Raises:
        InvalidColorError: color is not a keyword rich understands.
    """
    if color is None and not bold:
        return None

    style = Style()
    if color is not None:
        try:
            style = Style.parse(color)
        except (StyleSyntaxError, ColorParseError) as e:
            raise InvalidColorError(color) from e
    if bold:
        style += Style(bold=True)
    return style


def render_styled(text: str, style: Style | None) -> str:
    """text wrapped in the style's SGR sequence. Unstyled text is returned as-is.

    Decoration is written whatever the destination: terminals, pipes and
    capture buffers all receive the same escape sequences.
    """
    if style is None:
        return text
    return style.render(text)
