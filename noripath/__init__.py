"""Rendering building blocks: properties, objects, geometry, filters, frames, viewer controls and an LDLT solver."""

__version__ = "0.1.0"