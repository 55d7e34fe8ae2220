"""
Tool interface shared by every invocable capability.

A tool has exactly two capabilities: describing itself (get_definition) and
running against validated input (execute).
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

import pydantic
from pydantic import BaseModel

from ..constants import ErrorMessages
from ..errors import ValidationError
from ..models.inputs import ToolInput
from ..models.responses import ErrorResponse, ToolDefinition, format_response

logger = logging.getLogger(__name__)


class Tool(ABC):
    name: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[ToolInput]]
    input_schema: ClassVar[dict[str, Any]]

    def get_definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name, description=self.description, input_schema=self.input_schema
        )

    def parse_input(self, arguments: Mapping[str, Any] | None) -> ToolInput:
        """Validate raw arguments against input_model.

        Raises:
            ValidationError: If the arguments do not fit the model
        """
        try:
            return self.input_model.model_validate(dict(arguments or {}))
        except pydantic.ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
                for err in e.errors()
            )
            raise ValidationError(ErrorMessages.INVALID_INPUT.format(self.name, details)) from e

    @abstractmethod
    async def execute(self, arguments: Mapping[str, Any] | None, app_id: str) -> BaseModel:
        """Run the tool with the caller's Yahoo app id."""


async def run_tool(
    tool: Tool,
    arguments: Mapping[str, Any],
    app_id: str | None,
    output_mode: str = "json",
) -> str:
    """Execute a tool for a decorator-registered (stdio) entry point.

    Failures are returned as an ErrorResponse string rather than raised.
    """
    try:
        if not app_id:
            raise ValidationError(ErrorMessages.APP_ID_NOT_CONFIGURED)
        result = await tool.execute(arguments, app_id)
        return format_response(result, output_mode)
    except Exception as e:
        logger.error("%s failed: %s", tool.name, e)
        return format_response(ErrorResponse(error=str(e)), output_mode)
