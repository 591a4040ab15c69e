"""Reference data type definitions."""

from typing import TypedDict


class Topic(TypedDict):
    """Row of the topics table."""

    description: str
    category: str
