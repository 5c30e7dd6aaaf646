"""Tool-request router exposing catalog and repository operations as text."""

from .handlers import ToolError
from .models import TextContent
from .router import TOOLS, ToolRouter, ToolSpec

__all__ = ["TOOLS", "TextContent", "ToolError", "ToolRouter", "ToolSpec"]
