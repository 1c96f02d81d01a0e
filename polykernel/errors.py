"""Exceptions raised by the geometry kernel."""


class GeometryError(ValueError):
    """Base class for every error raised by polykernel."""


class InvalidInputError(GeometryError):
    """Input has the wrong shape: too few vertices, non-numeric coordinates."""


class DegenerateInputError(InvalidInputError):
    """Input is well-formed but degenerate (zero area, all points colinear)."""


class HullError(GeometryError):
    """A hull walk failed to close."""


class TriangulationError(GeometryError):
    """Ear clipping ran out of ears before reaching the last triangle."""
