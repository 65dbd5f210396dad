"""MCP Server for reading and writing markdown documents section by section."""

import asyncio
import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .tools.list_documents import list_documents as do_list_documents
from .tools.get_outline import get_outline as do_get_outline
from .tools.get_section import get_section as do_get_section
from .tools.set_section import set_section as do_set_section


# Create MCP server
server = Server("mdtree-mcp")

_TITLES_SCHEMA = {
    "type": "array",
    "items": {"type": "string"},
    "description": "Header titles from the top of the document down to the section, e.g. [\"Usage\", \"Options\"]",
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="list_documents",
            description="""List markdown documents under the document root.

The root is the MDTREE_ROOT environment variable, or the server's working
directory. Hidden directories are skipped.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "max_depth": {
                        "type": "integer",
                        "description": "Maximum directory depth to search (default: 5)",
                        "default": 5,
                    },
                },
            },
        ),
        Tool(
            name="get_outline",
            description="""Get the section outline of a markdown document.

Returns nested section titles and header levels. Use it to find the title
path of a section before reading or writing it. Headers inside fenced code
blocks are not sections.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path of the document relative to the root (e.g. 'docs/guide.md')",
                    },
                    "max_depth": {
                        "type": "integer",
                        "description": "Only expand sections with header level <= this value",
                    },
                },
                "required": ["file_path"],
            },
        ),
        Tool(
            name="get_section",
            description="""Get the markdown of one section, including its subsections.

The section is selected by its title path. An empty path returns the whole
document. Header levels in the result are normalized to the section's depth.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path of the document relative to the root",
                    },
                    "titles": _TITLES_SCHEMA,
                    "include_title": {
                        "type": "boolean",
                        "description": "Include the section's own header line",
                        "default": True,
                    },
                },
                "required": ["file_path", "titles"],
            },
        ),
        Tool(
            name="set_section",
            description="""Replace a section's content, or append a new section.

Content is written without the section's own header line. Headers inside the
content are re-leveled below the section ('# Foo' under a level-2 section
becomes '### Foo'). Fails if any section would end up deeper than h6.
Blocked in read-only mode (MDTREE_READ_ONLY=true).""",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path of the document relative to the root",
                    },
                    "titles": _TITLES_SCHEMA,
                    "content": {
                        "type": "string",
                        "description": "New markdown content of the section",
                    },
                },
                "required": ["file_path", "titles", "content"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "list_documents":
            result = do_list_documents(max_depth=arguments.get("max_depth", 5))
        elif name == "get_outline":
            result = do_get_outline(
                file_path=arguments["file_path"],
                max_depth=arguments.get("max_depth"),
            )
        elif name == "get_section":
            result = do_get_section(
                file_path=arguments["file_path"],
                titles=arguments["titles"],
                include_title=arguments.get("include_title", True),
            )
        elif name == "set_section":
            result = do_set_section(
                file_path=arguments["file_path"],
                titles=arguments["titles"],
                content=arguments["content"],
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
