"""Output renderers."""

from .console import render_listing, render_record

__all__ = ["render_listing", "render_record"]
