"""Text layout engine.

Positions glyph outlines along a pen cursor and draws them into a single
combined path. Layout is strictly left to right:

- A newline returns the pen to x = 0 and moves the baseline down by one
  line height; kerning never applies across a line break.
- Characters without a glyph are skipped with a warning and do not move
  the pen.
- Pair kerning (when enabled) shifts the pen before the glyph is drawn.
- After drawing, the pen advances by the glyph advance plus spacing.
"""

from fontTools.pens.transformPen import TransformPen

from textrude.config import TextConfig
from textrude.core.path_builder import PathBuilder
from textrude.domain import Path
from textrude.exceptions import GlyphOutlineError
from textrude.io.reader import FontFace
from textrude.utils.logging import ConversionLogger

ESCAPED_NEWLINE = "\\n"


def convert_escapes(text: str) -> str:
    """Turn the two-character sequence backslash-n into a line break.

    No other escapes are recognized.

    Args:
        text: Raw input text

    Returns:
        Text with escaped newlines converted

    Examples:
        >>> convert_escapes("line1\\\\nline2")
        'line1\\nline2'
    """
    return text.replace(ESCAPED_NEWLINE, "\n")


class TextLayout:
    """Lays out text with a font face into a combined outline path.

    Example:
        face = FontFace.from_path(Path("font.ttf"))
        layout = TextLayout.from_config(face, TextConfig(size=32))
        path = layout.layout("Hello\\nWorld")
    """

    def __init__(
        self,
        face: FontFace,
        scale: float,
        baseline_y: float,
        spacing: float = 0.0,
        kerning: bool = True,
        logger: ConversionLogger | None = None,
    ) -> None:
        """Initialize the layout engine.

        Args:
            face: Font face providing metrics and outlines
            scale: Layout units per font unit
            baseline_y: Baseline of the first line
            spacing: Extra advance added after every glyph
            kerning: Apply pair kerning
            logger: Conversion logger for diagnostics
        """
        self.face = face
        self.scale = scale
        self.baseline_y = baseline_y
        self.spacing = spacing
        self.kerning = kerning
        self.logger = logger if logger is not None else ConversionLogger()

    @classmethod
    def from_config(
        cls,
        face: FontFace,
        config: TextConfig,
        logger: ConversionLogger | None = None,
    ) -> "TextLayout":
        """Create a layout engine for a requested font size.

        The scale maps font units to layout units (size / units per em) and
        the first baseline sits one scaled ascender above y = 0.
        """
        scale = config.size / face.units_per_em
        return cls(
            face=face,
            scale=scale,
            baseline_y=face.ascender * scale,
            spacing=config.spacing,
            kerning=config.kerning,
            logger=logger,
        )

    @property
    def line_advance(self) -> float:
        """Vertical distance between consecutive baselines."""
        return self.face.line_height * self.scale

    def layout(self, text: str) -> Path:
        """Lay out text and return the combined outline.

        Args:
            text: Text to render; '\\n' starts a new line

        Returns:
            Path with the outlines of every placed glyph

        Raises:
            GlyphOutlineError: If a resolved glyph fails to draw
        """
        builder = PathBuilder(glyph_set=self.face.glyph_set)
        pen_x = 0.0
        pen_baseline = self.baseline_y
        prev_glyph: str | None = None

        for char in text:
            if char == "\n":
                pen_x = 0.0
                pen_baseline -= self.line_advance
                prev_glyph = None
                self.logger.log_line_break(pen_baseline)
                continue

            glyph_name = self.face.glyph_for_char(char)
            if glyph_name is None:
                self.logger.log_glyph_missing(char)
                continue

            if self.kerning and prev_glyph is not None:
                kern = self.face.kerning(prev_glyph, glyph_name)
                if kern is not None:
                    pen_x += kern * self.scale

            self._draw(builder, char, glyph_name, pen_x, pen_baseline)
            self.logger.log_glyph_placed(char, glyph_name, pen_x, pen_baseline)

            pen_x += self.face.advance_width(glyph_name) * self.scale + self.spacing
            prev_glyph = glyph_name

        return builder.build()

    def _draw(
        self,
        builder: PathBuilder,
        char: str,
        glyph_name: str,
        pen_x: float,
        pen_baseline: float,
    ) -> None:
        """Draw one glyph scaled and translated to the pen position."""
        transform = (self.scale, 0, 0, self.scale, pen_x, pen_baseline)
        try:
            self.face.draw_glyph(glyph_name, TransformPen(builder, transform))
        except Exception as e:
            raise GlyphOutlineError(char, glyph_name, str(e)) from e
