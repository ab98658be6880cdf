"""Layered application framework: events, layers, a host-driven window, input polling and a frame loop."""

__version__ = "0.3.0"