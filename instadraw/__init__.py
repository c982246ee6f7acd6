"""Instance buffer, frame clock, shaders, textures and event handling for instanced 2D OpenGL rendering."""

__version__ = "0.1.0"