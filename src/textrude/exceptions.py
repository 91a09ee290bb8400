"""Exception hierarchy for Textrude."""


class TextrudeError(Exception):
    """Base exception for all Textrude errors.

    Attributes:
        stage: Pipeline stage that failed, set when the error passes
            through the conversion pipeline
    """

    stage: str | None = None


class FontError(TextrudeError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading or parsing a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFaceIndexError(FontError):
    """Requested face index does not exist in the font file."""

    def __init__(self, path: str, face_index: int, face_count: int) -> None:
        self.path = path
        self.face_index = face_index
        self.face_count = face_count
        plural = "" if face_count == 1 else "s"
        super().__init__(
            f"Face index {face_index} is out of range for '{path}' "
            f"(available 0..={face_count - 1}; font has {face_count} face{plural})"
        )


class GlyphError(TextrudeError):
    """Errors related to glyph outlines."""

    pass


class GlyphOutlineError(GlyphError):
    """A resolved glyph could not produce its outline."""

    def __init__(self, char: str, glyph_name: str, reason: str) -> None:
        self.char = char
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(
            f"Failed to get outline for '{char}' (glyph '{glyph_name}'): {reason}"
        )


class GeometryError(TextrudeError):
    """Errors in geometric processing."""

    pass


class TessellationError(GeometryError):
    """The outline path could not be triangulated."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to tessellate outline: {reason}")


class GeometryTooComplexError(GeometryError):
    """Mesh needs more vertices than 16-bit indices can address."""

    def __init__(self, vertex_count: int, limit: int) -> None:
        self.vertex_count = vertex_count
        self.limit = limit
        super().__init__(
            f"Geometry too complex: {vertex_count:,} vertices exceed the "
            f"limit of {limit:,}; try a shorter text or a larger --tolerance"
        )


class OutputError(TextrudeError):
    """Errors writing the output mesh."""

    pass


class StlWriteError(OutputError):
    """Error writing an STL file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write STL '{path}': {reason}")
