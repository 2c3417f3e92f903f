"""Resume rendering pipeline: merge, customize, project and export."""

__version__ = "0.1.0"
