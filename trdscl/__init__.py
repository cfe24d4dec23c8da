"""Create TR-DOS disk images (.trd) and SCL archives (.scl) for the ZX Spectrum."""

__version__ = "1.0.0"
__all__ = ["cli", "fstools", "scl", "trd", "writer"]