"""Height field synthesis."""

from wavemesh.fields.waves import WaveField, synthesize_heights

__all__ = ["WaveField", "synthesize_heights"]
