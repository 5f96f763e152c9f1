"""
Pinout Diagram MCP server.

Renders integrated-circuit pinout diagrams from declarative chip
descriptions and exposes them as MCP tools.
"""

__version__ = '0.1.0'
