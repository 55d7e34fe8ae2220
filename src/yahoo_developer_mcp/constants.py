"""
Constants for yahoo-developer-mcp server.

All magic strings, API metadata, and configuration values live here.
"""


class ServerConfig:
    NAME = "yahoo-developer-mcp"
    VERSION = "0.1.0"
    DESCRIPTION = "Yahoo Developer MCP Server - HTTP API"
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 3000
    DEFAULT_ALLOWED_ORIGINS = ("http://localhost:3000",)


class YahooApiConfig:
    BASE_URL = "https://map.yahooapis.jp"
    LOCAL_SEARCH_PATH = "/search/local/V1/localSearch"
    GEOCODE_PATH = "/geocode/V1/geoCoder"
    REVERSE_GEOCODE_PATH = "/geocode/V1/reverseGeoCoder"
    OUTPUT_FORMAT = "json"
    USER_AGENT = "yahoo-developer-mcp/0.1.0"
    TIMEOUT_SECONDS = 30.0


class PagingConfig:
    DEFAULT_PAGE_SIZE = 10
    TTL_SECONDS = 5 * 60
    MAX_KEYS = 10_000


class ProtocolConfig:
    JSONRPC_VERSION = "2.0"
    PROTOCOL_VERSION = "2024-11-05"
    LOGGING_LEVELS = ["error", "warn", "info", "debug"]
    SSE_HEARTBEAT_SECONDS = 30.0


class ErrorCode:
    """JSON-RPC error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    UNAUTHORIZED = -32001


class EnvVar:
    MCP_STDIO = "MCP_STDIO"
    HOST = "HOST"
    PORT = "PORT"
    ALLOWED_ORIGINS = "ALLOWED_ORIGINS"
    YAHOO_APP_ID = "YAHOO_APP_ID"
    YAHOO_API_BASE_URL = "YAHOO_API_BASE_URL"
    LOG_LEVEL = "LOG_LEVEL"


# Tool names as exposed over MCP
LOCAL_SEARCH_TOOL = "localSearch"
GEOCODE_TOOL = "geocode"
REVERSE_GEOCODE_TOOL = "reverseGeocode"

SEARCH_TOOLS = [LOCAL_SEARCH_TOOL]
GEOCODING_TOOLS = [GEOCODE_TOOL, REVERSE_GEOCODE_TOOL]
ALL_TOOLS = SEARCH_TOOLS + GEOCODING_TOOLS

# MCP logging/setLevel values mapped to stdlib logging level names
MCP_LOG_LEVELS: dict[str, str] = {
    "debug": "DEBUG",
    "info": "INFO",
    "notice": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
    "alert": "CRITICAL",
    "emergency": "CRITICAL",
}


class ErrorMessages:
    LOCAL_SEARCH_TARGET = "localSearch requires either query or lat+lng"
    GEOCODE_QUERY = "geocode requires query"
    REVERSE_COORDINATES = "reverseGeocode requires lat & lng"
    INVALID_INPUT = "Invalid input for {}: {}"
    METHOD_NOT_FOUND = "Method not found: {}"
    UNKNOWN_TOOL = "Unknown tool: {}"
    MISSING_TOOL_NAME = "tools/call requires params.name"
    INVALID_REQUEST = "Invalid Request: {}"
    PARSE_ERROR = "Parse error: {}"
    INTERNAL_ERROR = "Internal error"
    AUTH_REQUIRED = "Authorization header with Bearer token is required"
    AUTH_EMPTY = "Yahoo API Key is required. Provide via Authorization header (Bearer token)."
    APP_ID_NOT_CONFIGURED = "YAHOO_APP_ID is not set; stdio mode cannot reach the Yahoo API"
    DUPLICATE_HANDLER = "Duplicate handler registered for method '{}'"
    DUPLICATE_TOOL = "Duplicate tool registered with name '{}'"
    API_ERROR = "HTTP {} for {}"
    NETWORK_ERROR = "HTTP error for {}: {}"
    INVALID_JSON = "Invalid JSON from {}: {}"
    UNKNOWN_LOG_LEVEL = "Unknown log level '{}'"
    INVALID_PORT = "Invalid PORT '{}': expected an integer between 0 and 65535"
    INVALID_LOG_LEVEL = "Invalid LOG_LEVEL '{}': expected one of {}"

