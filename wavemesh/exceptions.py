"""Custom exceptions for the wavemesh package."""


class WaveMeshError(Exception):
    """Base exception for wavemesh package."""

    pass


class ConfigurationError(WaveMeshError):
    """Invalid generation parameters."""

    pass


class MeshGenerationError(WaveMeshError):
    """Mesh generation failed."""

    pass


class MeshLoadError(WaveMeshError):
    """Failed to load a mesh from file."""

    pass


class MeshWriteError(WaveMeshError):
    """Failed to write a mesh to file."""

    pass
