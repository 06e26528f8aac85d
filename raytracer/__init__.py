"""A path-tracing renderer with geometric primitives, materials, textures and a BVH."""

__version__ = "0.1.0"