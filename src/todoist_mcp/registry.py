"""Selection of the tools a session registers."""
import logging
from typing import Iterable, Optional

from .config import ServerConfig
from .tools import ToolDescriptor, get_tool_descriptors

logger = logging.getLogger("todoist-mcp.registry")


def should_register_tool(name: str, config: ServerConfig) -> bool:
    """True unless minimal mode is on and ``name`` is not an essential tool."""
    return not config.minimal_tool_set or name in config.essential_tools


def build_registry(
    config: ServerConfig,
    descriptors: Optional[Iterable[ToolDescriptor]] = None
) -> dict[str, ToolDescriptor]:
    """Build the table of registered tools, keyed by name, in catalogue order.

    Args:
        config: Server configuration holding the minimal-mode switch
        descriptors: Catalogue to filter (defaults to the full Todoist catalogue)

    Returns:
        A new dict on every call
    """
    catalogue = list(descriptors) if descriptors is not None else get_tool_descriptors()
    registry = {
        descriptor.name: descriptor
        for descriptor in catalogue
        if should_register_tool(descriptor.name, config)
    }

    if config.minimal_tool_set:
        unknown = config.essential_tools - {descriptor.name for descriptor in catalogue}
        if unknown:
            logger.warning(f"Ignoring essential tools missing from the catalogue: {sorted(unknown)}")

    logger.info(
        f"Registered {len(registry)} of {len(catalogue)} tools "
        f"({'minimal' if config.minimal_tool_set else 'full'} tool set)"
    )
    return registry
