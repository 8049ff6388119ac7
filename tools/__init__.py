# tools package for MCP server tools
# Modules in this package expose `get_tools(client: ApiClient) -> dict[str, dict]` mapping a tool name
# to {"func", "title", "description"}. server.py imports every public module here and registers the tools.
__all__ = []
