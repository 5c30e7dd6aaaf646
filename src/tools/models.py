"""Argument and result models for the tool-request router."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

VariantArg = Literal["nativewind", "themed", "unstyled"]


class ToolArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NoArguments(ToolArguments):
    pass


class ComponentArguments(ToolArguments):
    component_name: str = Field(
        alias="componentName",
        min_length=1,
        description="Name of the Gluestack UI component (e.g., 'Button', 'Input', 'Modal')",
    )
    variant: Optional[VariantArg] = Field(
        default=None,
        description="Component variant; defaults to nativewind when available",
    )


class ComponentNameArguments(ToolArguments):
    component_name: str = Field(
        alias="componentName",
        min_length=1,
        description="Name of the Gluestack UI component to list variants for",
    )


class DirectoryArguments(ToolArguments):
    path: str = Field(
        default="",
        description="Path within the Gluestack UI repository (relative to root). Leave empty for full structure.",
    )
    depth: int = Field(default=3, ge=1, le=10, description="Maximum depth to traverse (default: 3)")
    include_files: bool = Field(
        default=True,
        alias="includeFiles",
        description="Whether to include files in the structure (default: true)",
    )


class TextContent(BaseModel):
    """A single text block returned to the caller."""

    type: Literal["text"] = "text"
    text: str
