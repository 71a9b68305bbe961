"""Custom exceptions for the faultmesh package."""


class FaultMeshError(Exception):
    """Base exception for faultmesh package."""

    pass


class InvalidParameterError(FaultMeshError, ValueError):
    """Grid or generation parameters rejected before any buffer is built."""

    pass


class IndexOutOfRangeError(FaultMeshError, IndexError):
    """Vertex, face or edge index beyond the generated counts."""

    pass
