"""CLI package for schemagen tools."""

__all__ = [
    "generate",
    "infer",
    "render",
]
