#!/usr/bin/env python3
"""Test that the MCP server has the pinout tools registered"""
import asyncio

from pinout_mcp.server import create_server


def test_pinout_tools_registered():
    server = create_server()
    tools = asyncio.run(server.list_tools())
    names = {tool.name for tool in tools}

    for tool_name in ("list_chips", "get_pinout"):
        assert tool_name in names, f"[MISSING] {tool_name}"

    get_pinout = next(tool for tool in tools if tool.name == "get_pinout")
    assert "Render pinout diagrams" in get_pinout.description

