from .api import LocalSearchTool, register_search_tools

__all__ = ["LocalSearchTool", "register_search_tools"]
