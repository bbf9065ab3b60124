"""Core of a small 3D engine: vector math, scene graph, camera, textures and OBJ import."""

__version__ = "0.1.0"