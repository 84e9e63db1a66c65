"""RoundCaddy analytics core: strokes gained and GPS tracking."""

__version__ = "0.1.0"
