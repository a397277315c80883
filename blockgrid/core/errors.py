"""Exceptions raised by mesh construction and queries."""


class MeshError(Exception):
    """Base class for mesh geometry errors."""

    pass


class MeshStateError(MeshError, RuntimeError):
    """Raised when a mesh is queried before init, or initialized twice."""

    pass


class MeshConservationError(MeshError, ArithmeticError):
    """Raised when computed cell widths do not cover the axis extent."""

    pass
