"""Asynchronous frame-processing pipelines for streaming and remote rendering."""

__version__ = "0.1.4"