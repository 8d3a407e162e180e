"""
Setup-time failures.

Nothing in the per-frame loop raises: both errors surface while the table,
its layout, or its drawing surface is being built.
"""


class ConfigurationError(ValueError):
    """Degenerate surface size or constants that would produce a bad layout."""


class SurfaceUnavailable(RuntimeError):
    """The drawing or presenting collaborator cannot be used."""
