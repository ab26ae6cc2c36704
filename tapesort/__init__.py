"""External sorting of integer files on simulated tape devices."""

__version__ = "0.1.0"
__all__ = ["cli", "sorting", "tape"]