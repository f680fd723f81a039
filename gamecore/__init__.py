"""Rendering-free core of a 2D game engine: vectors, transforms, logging, animation, components, input, camera, collision, game objects and game states."""

__version__ = "0.1.0"