"""lavaboard: box-drawn debug consoles and character canvases."""

__version__ = "0.1.0"
