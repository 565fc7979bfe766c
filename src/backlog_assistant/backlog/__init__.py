"""Backlog API module for backlog_assistant.

This module provides the Backlog API client and its resource operations.
"""

from .categories import CategoriesMixin
from .client import BacklogClient
from .config import BacklogConfig
from .custom_fields import CustomFieldsMixin
from .issue_types import IssueTypesMixin
from .issues import IssuesMixin
from .milestones import MilestonesMixin
from .projects import ProjectsMixin
from .space import SpaceMixin
from .users import UsersMixin
from .wikis import WikisMixin


class BacklogFetcher(
    SpaceMixin,
    ProjectsMixin,
    IssuesMixin,
    UsersMixin,
    WikisMixin,
    MilestonesMixin,
    CategoriesMixin,
    IssueTypesMixin,
    CustomFieldsMixin,
):
    """
    The main Backlog client class providing access to all Backlog operations.

    This class inherits from multiple mixins that provide specific functionality:
    - SpaceMixin: Space information, activities and notification
    - ProjectsMixin: Project CRUD
    - IssuesMixin: Issue CRUD and comments
    - UsersMixin: Users and their activities
    - WikisMixin: Wiki pages and tags
    - MilestonesMixin: Project versions
    - CategoriesMixin: Project categories
    - IssueTypesMixin: Project issue types
    - CustomFieldsMixin: Project custom fields
    """

    pass


__all__ = ["BacklogFetcher", "BacklogConfig", "BacklogClient"]
