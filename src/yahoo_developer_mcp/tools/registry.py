"""Fixed set of tools, resolved by exact name."""

from collections.abc import Iterable, Iterator

from ..constants import ErrorMessages
from ..errors import DuplicateHandlerError, MessageId, UnknownToolError
from ..models.responses import ToolDefinition
from .base import Tool


class ToolRegistry:
    """Immutable name -> tool mapping built once at startup."""

    def __init__(self, tools: Iterable[Tool]):
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise DuplicateHandlerError(ErrorMessages.DUPLICATE_TOOL.format(tool.name))
            self._tools[tool.name] = tool

    def get(self, name: str, id: MessageId = None) -> Tool:
        """Return the tool called name.

        Raises:
            UnknownToolError: If no tool has that name
        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name, id=id)
        return tool

    def definitions(self) -> list[ToolDefinition]:
        return [tool.get_definition() for tool in self._tools.values()]

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
