from core.logging_config import setup_logging
from core.config import Settings, load_settings
from core.client import ApiClient
from core.errors import ConfigError
from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pathlib import Path
from importlib import import_module
from typing import Any, Callable, Optional
import pkgutil
import inspect
import logging
import sys

logger = logging.getLogger("batchdata")

TOOLS_PACKAGE = "tools"
PROJECT_DIR = Path(__file__).resolve().parent
INSTRUCTIONS_FILE = PROJECT_DIR / "resources" / "assistant_instructions.md"


###################################################### MCP Tools ######################################################

def make_wrapper(func: Callable[..., Any]) -> Callable[..., Any]:
    """Expose a handler's parameters to FastMCP and turn its envelope into a CallToolResult.

    The return annotation is dropped so FastMCP does not derive an output schema.
    """
    sig = inspect.signature(func).replace(return_annotation=inspect.Signature.empty)

    async def _wrapped(**call_kwargs) -> Any:
        envelope = await func(**call_kwargs)
        return CallToolResult.model_validate(envelope)

    _wrapped.__signature__ = sig
    _wrapped.__name__ = getattr(func, "__name__", "tool")
    _wrapped.__doc__ = func.__doc__
    return _wrapped


def discover_tools(client: ApiClient) -> dict[str, dict[str, Any]]:
    """Collect `get_tools(client)` mappings from every public module in the tools package."""
    tools: dict[str, dict[str, Any]] = {}
    tools_path = PROJECT_DIR / TOOLS_PACKAGE
    for _finder, name, _ispkg in pkgutil.iter_modules([str(tools_path)]):
        if name.startswith("_"):
            continue
        module_name = f"{TOOLS_PACKAGE}.{name}"
        mod = import_module(module_name)
        if not hasattr(mod, "get_tools"):
            logger.warning(f"Tools module {module_name} has no get_tools(); skipping")
            continue
        logger.info(f"Imported tools module: {module_name}")
        for tool_name, meta in mod.get_tools(client).items():
            if tool_name in tools:
                raise ValueError(f"Duplicate tool name {tool_name!r} in {module_name}")
            tools[tool_name] = meta
    return tools


def create_server(settings: Settings, client: Optional[ApiClient] = None) -> FastMCP:
    client = client or ApiClient(settings)

    instructions = None
    if INSTRUCTIONS_FILE.is_file():
        instructions = INSTRUCTIONS_FILE.read_text(encoding="utf-8")

    mcp = FastMCP(settings.server_name, instructions=instructions)
    logger.info("MCP server instance created with instructions: %s", bool(instructions))

    registered_tool_names: list[str] = []
    for tool_name, meta in discover_tools(client).items():
        mcp.add_tool(
            make_wrapper(meta["func"]),
            name=tool_name,
            title=meta.get("title"),
            description=meta.get("description"),
        )
        registered_tool_names.append(tool_name)
    logger.info(f"Total tools registered: {len(registered_tool_names)} , tool names: {registered_tool_names}")
    return mcp


###################################################### Startup ######################################################

def main() -> None:
    load_dotenv()
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_dir, level=settings.log_level)
    logger.info("MCP server bootstrap starting: %r", settings)
    mcp = create_server(settings)

    logger.info("Starting MCP server...")
    try:
        mcp.run(transport="stdio")
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See the server log for details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
