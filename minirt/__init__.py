"""Ray tracer core: vector math, shape intersection, transformations, scene model and scene parsing."""

__version__ = "0.1.0"