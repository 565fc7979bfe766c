"""
Command models.

This module provides the Pydantic models exchanged between the intent
parser, the dispatcher and the presentation layer.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class EntityType(str, Enum):
    """Entity types the dispatcher knows how to handle."""

    PROJECTS = "projects"
    ISSUES = "issues"
    USERS = "users"
    WIKIS = "wikis"
    MILESTONES = "milestones"
    CATEGORIES = "categories"
    ISSUE_TYPES = "issueTypes"
    CUSTOM_FIELDS = "customFields"
    SPACE = "space"

    @classmethod
    def resolve(cls, value: str) -> "EntityType | None":
        """Map a wire value to an entity type, or None if unknown."""
        if value in _ENTITY_ALIASES:
            return _ENTITY_ALIASES[value]
        try:
            return cls(value)
        except ValueError:
            return None


# Backlog calls milestones "versions"
_ENTITY_ALIASES = {"versions": EntityType.MILESTONES}


class Action(str, Enum):
    """Actions an entity handler may support."""

    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    COMMENTS = "comments"
    ADD_COMMENT = "addComment"
    ACTIVITIES = "activities"
    TAGS = "tags"
    NOTIFICATION = "notification"
    UPDATE_NOTIFICATION = "updateNotification"

    @classmethod
    def resolve(cls, value: str) -> "Action | None":
        try:
            return cls(value)
        except ValueError:
            return None


class Intent(BaseModel):
    """
    Structured command produced from one user message.

    Accepts the parser's wire names (``type``, ``rawCommand``) as well as the
    field names.
    """

    model_config = ConfigDict(frozen=True)

    entity_type: str = Field(
        validation_alias=AliasChoices("entity_type", "entityType", "type")
    )
    action: str
    params: dict[str, Any] = Field(default_factory=dict)
    raw_text: str = Field(
        default="", validation_alias=AliasChoices("raw_text", "rawText", "rawCommand")
    )

    @field_validator("params", mode="before")
    @classmethod
    def _default_params(cls, value: Any) -> Any:
        return {} if value is None else value


class CommandResult(BaseModel):
    """Uniform outcome of a dispatched command."""

    success: bool
    message: str
    data: Any = None

    @classmethod
    def ok(cls, message: str, **data: Any) -> "CommandResult":
        """Successful result; keyword arguments become the ``data`` mapping."""
        return cls(success=True, message=message, data=data or None)

    @classmethod
    def fail(cls, message: str) -> "CommandResult":
        return cls(success=False, message=message)
