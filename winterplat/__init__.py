"""A small OpenGL game framework: window loop, camera, transforms, physics and shaders."""

__version__ = "0.1.0"
__all__ = ["camera", "game", "gametime", "glmath", "mouse", "physics", "shader", "transform", "window"]