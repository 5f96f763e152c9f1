"""
Pinout Diagram Tools

Provides pinout diagram rendering using the pinout_core library. Chip data
comes from the built-in chip definitions, or from a JSON chip file.
"""
import logging
from typing import List, Optional
from mcp.server.fastmcp import Context

from .. import config
from ..pinout_core.adapters import BuiltinChipSource, JSONChipSource
from ..pinout_core.librarian import PinoutLibrarian
from ..pinout_core.settings import SettingsController

logger = logging.getLogger(__name__)


def create_librarian(
    chip_file: Optional[str] = None,
    settings: Optional[SettingsController] = None
) -> PinoutLibrarian:
    """Librarian over the JSON chip file if one is configured, else the built-in chips."""
    path = chip_file or config.CHIP_FILE
    source = JSONChipSource.from_file(path) if path else BuiltinChipSource()
    return PinoutLibrarian(source, settings)


async def list_chips(
    chip_file: Optional[str] = None,
    ctx: Context | None = None
) -> str:
    """
    List every chip that pinout diagrams can be rendered for

    Shows each chip's manufacturer, name and package variants. Use the
    chip names with get_pinout.

    Args:
        chip_file: Optional path to a JSON file with chip definitions

    Returns:
        Markdown-formatted chip index

    Example:
        list_chips()
    """
    try:
        librarian = create_librarian(chip_file)
        return librarian.get_index()

    except Exception as e:
        logger.exception("list_chips failed")
        return f"Error listing chips: {str(e)}"


async def get_pinout(
    chip_names: Optional[List[str]] = None,
    hidden_groups: Optional[List[str]] = None,
    shown_groups: Optional[List[str]] = None,
    align_data: Optional[bool] = None,
    font_size: Optional[int] = None,
    chip_file: Optional[str] = None,
    ctx: Context | None = None
) -> str:
    """
    Render pinout diagrams of one or more chips

    Every pin is shown at its place around the package body with its pin
    number, its name and the labels of the visible function groups (ADC
    channels, PWM outputs, interrupts, ...). A legend lists each chip's
    function groups and whether they are shown.

    Args:
        chip_names: Chips to render; all chips when omitted or empty.
                    Unknown names are ignored.
        hidden_groups: Function group names to hide (e.g., "ADC Input Channel")
        shown_groups: Function group names to show, including groups that
                      are hidden by default
        align_data: Give each function group its own column
        font_size: Font size hint for graphical front ends
        chip_file: Optional path to a JSON file with chip definitions

    Returns:
        Text pinout diagrams

    Example:
        get_pinout(["74HC595"])
        get_pinout(["ATtiny85"], shown_groups=["Pins with Internal Pull-up/Pull-Down"])
    """
    try:
        settings = SettingsController(chip_filter=chip_names or [])
        if align_data is not None:
            settings.set_align_data(align_data)
        if font_size is not None:
            settings.set_font_size(font_size)

        librarian = create_librarian(chip_file, settings)

        for chip in librarian.selected_chips():
            known = chip.group_names()
            for group_name in shown_groups or []:
                if group_name in known:
                    settings.show_group(chip.name, group_name)
            for group_name in hidden_groups or []:
                if group_name in known:
                    settings.hide_group(chip.name, group_name)

        return librarian.render()

    except Exception as e:
        logger.exception("get_pinout failed")
        return f"Error rendering pinout: {str(e)}"


# Register tools with MCP server
def register_pinout_tools(mcp):
    """Register all pinout tools with the MCP server"""

    mcp.tool()(list_chips)
    mcp.tool()(get_pinout)
