#!/usr/bin/env python3
"""
Tool registry for the Open-Meteo MCP server.
Centralizes tool registration and routes every tools/call request through a
single dispatcher.

A call to a tool the server does not have is a protocol fault (JSON-RPC
METHOD_NOT_FOUND). A tool that runs and fails (bad coordinates, unknown
location, provider outage) still answers normally, with ``isError`` set on the
result and the reason in its text.
"""

import inspect
import logging

import mcp.types as types
from mcp.server.fastmcp import FastMCP
from mcp.shared.exceptions import McpError
from pydantic import ConfigDict, ValidationError, create_model

from config import Config
from tools.locations import register_location_tools
from tools.tool_names import ToolName
from tools.weather import register_weather_tool
from utils.errors import InvalidArgumentsError, WeatherToolError
from utils.location_store import LocationStore

logger = logging.getLogger("mcp.tools")

SERVER_INSTRUCTIONS = (
    "Weather forecasts for saved locations. Save places with add_location_by_search "
    "(coordinates stay on this machine), then ask for get_forecast by the saved name. "
    "Use list_locations to see saved names."
)


def build_arguments_model(tool_name, handler):
    """Pydantic model of a handler's keyword arguments.

    Unknown fields are rejected and types are strict: a boolean is not a number
    and a number is not a string. JSON integers still satisfy float fields.
    """
    fields = {}
    for param in inspect.signature(handler).parameters.values():
        default = ... if param.default is inspect.Parameter.empty else param.default
        fields[param.name] = (param.annotation, default)
    return create_model(
        f"{tool_name}Arguments",
        __config__=ConfigDict(extra="forbid", strict=True),
        **fields,
    )


def _format_validation_error(error: ValidationError):
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{field}: {err['msg']}")
    return "; ".join(problems)


def _text_result(text, is_error=False):
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)], isError=is_error
    )


class ToolDispatcher:
    """Routes tool invocations to their handlers and shapes the replies."""

    def __init__(self, handlers):
        self.handlers = dict(handlers)
        self.argument_models = {
            tool: build_arguments_model(tool.value, handler)
            for tool, handler in self.handlers.items()
        }

    async def dispatch(self, name, arguments=None) -> types.CallToolResult:
        """Run one tool call.

        Raises McpError (METHOD_NOT_FOUND) for an unknown tool name; every
        other failure comes back as a result with ``isError=True``.
        """
        tool = ToolName.lookup(name)
        if tool is None or tool not in self.handlers:
            logger.warning("Rejected call to unknown tool %r", name)
            raise McpError(
                types.ErrorData(
                    code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}"
                )
            )

        try:
            try:
                parsed = self.argument_models[tool].model_validate(arguments or {})
            except ValidationError as e:
                raise InvalidArgumentsError(
                    f"Invalid arguments for {tool.value}: {_format_validation_error(e)}"
                ) from e

            kwargs = {field: getattr(parsed, field) for field in type(parsed).model_fields}
            text = await self.handlers[tool](**kwargs)
        except WeatherToolError as e:
            logger.info("Tool %s failed: %s", tool.value, e)
            return _text_result(f"Error: {e}", is_error=True)
        except Exception:
            logger.exception("Tool %s raised an unexpected error", tool.value)
            return _text_result(
                f"Error: {tool.value} failed unexpectedly", is_error=True
            )

        logger.info("Tool %s succeeded", tool.value)
        return _text_result(text)

    async def handle_call_tool_request(self, req: types.CallToolRequest):
        """Request handler for the low-level server's tools/call method."""
        result = await self.dispatch(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    def install(self, app: FastMCP):
        """Make this dispatcher answer tools/call requests for ``app``."""
        app._mcp_server.request_handlers[types.CallToolRequest] = (
            self.handle_call_tool_request
        )


def register_all_tools(app: FastMCP, store, http_client=None):
    """Register all tools with the FastMCP app and return the handler table."""
    handlers = {}
    handlers.update(register_location_tools(app, store, http_client))
    handlers.update(register_weather_tool(app, store, http_client))
    return handlers


def create_app(store=None, http_client=None):
    """Build the FastMCP server with every tool registered and the dispatcher installed."""
    if store is None:
        store = LocationStore()
    app = FastMCP(
        Config.SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        host=Config.SERVER_HOST,
        port=Config.SERVER_PORT,
    )
    app._mcp_server.version = Config.SERVER_VERSION

    dispatcher = ToolDispatcher(register_all_tools(app, store, http_client))
    dispatcher.install(app)
    return app
