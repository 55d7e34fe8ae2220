"""Tests for server entry point and async server."""

from unittest.mock import patch


class TestAsyncServer:
    def test_mcp_exists(self):
        from yahoo_developer_mcp.async_server import mcp

        assert mcp is not None

    def test_context_exists(self):
        from yahoo_developer_mcp.async_server import context

        assert len(context.registry) == 3

    def test_app_exists(self):
        from yahoo_developer_mcp.async_server import app

        paths = {route.path for route in app.routes}
        assert {"/health", "/mcp", "/mcp/tools", "/mcp/tools/{tool_name}"} <= paths


class TestServerModule:
    def test_mcp_same_as_async_server(self):
        from yahoo_developer_mcp.async_server import mcp as async_mcp
        from yahoo_developer_mcp.server import mcp as server_mcp

        assert async_mcp is server_mcp

    def test_main_exists(self):
        from yahoo_developer_mcp.server import main

        assert callable(main)

    @patch("yahoo_developer_mcp.server.mcp")
    def test_main_stdio_mode(self, mock_mcp):
        from yahoo_developer_mcp.server import main

        with patch("sys.argv", ["yahoo-developer-mcp", "stdio"]):
            main()
        mock_mcp.run.assert_called_once_with(stdio=True)

    @patch("yahoo_developer_mcp.server.uvicorn")
    @patch("yahoo_developer_mcp.server.mcp")
    def test_main_http_mode(self, mock_mcp, mock_uvicorn):
        from yahoo_developer_mcp.server import app, main, settings

        with patch("sys.argv", ["yahoo-developer-mcp", "http", "--port", "9999"]):
            main()
        mock_uvicorn.run.assert_called_once_with(app, host=settings.host, port=9999)
        mock_mcp.run.assert_not_called()

    @patch("yahoo_developer_mcp.server.mcp")
    def test_main_auto_detect_stdio_env(self, mock_mcp):
        from yahoo_developer_mcp.server import main

        with (
            patch("sys.argv", ["yahoo-developer-mcp"]),
            patch.dict("os.environ", {"MCP_STDIO": "1"}),
        ):
            main()
        mock_mcp.run.assert_called_once_with(stdio=True)

    @patch("yahoo_developer_mcp.server.mcp")
    def test_main_auto_detect_not_tty(self, mock_mcp):
        from yahoo_developer_mcp.server import main

        with (
            patch("sys.argv", ["yahoo-developer-mcp"]),
            patch("sys.stdin") as mock_stdin,
            patch.dict("os.environ", {}, clear=True),
        ):
            mock_stdin.isatty.return_value = False
            main()
        mock_mcp.run.assert_called_once_with(stdio=True)

    @patch("yahoo_developer_mcp.server.uvicorn")
    @patch("yahoo_developer_mcp.server.mcp")
    def test_main_default_http(self, mock_mcp, mock_uvicorn):
        from yahoo_developer_mcp.server import app, main, settings

        with (
            patch("sys.argv", ["yahoo-developer-mcp", "--host", "localhost"]),
            patch("sys.stdin") as mock_stdin,
            patch.dict("os.environ", {}, clear=True),
        ):
            mock_stdin.isatty.return_value = True
            main()
        mock_uvicorn.run.assert_called_once_with(app, host="localhost", port=settings.port)
