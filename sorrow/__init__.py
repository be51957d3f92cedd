"""An incremental game simulation: engine, interface-side store and text rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]