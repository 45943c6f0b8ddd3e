"""Notes tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TreeNode(BaseModel):
    """A note file or a directory of notes."""

    is_directory: bool
    filename: str
    title: str
    description: str | None = None
    children: list["TreeNode"] = Field(default_factory=list)
