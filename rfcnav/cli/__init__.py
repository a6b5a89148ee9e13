"""Command line interface for the RFC navigator."""

# CLI modules are typically imported on-demand to avoid startup overhead
__all__ = []
