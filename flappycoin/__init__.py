"""A side-scrolling arcade game: fly through pipes and collect coins."""

__version__ = "1.0.0"
__all__ = ["__version__"]