"""Interactive shaded 3D torus viewer: mesh renderer, vector helpers and a Tk front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]