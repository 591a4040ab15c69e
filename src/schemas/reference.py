"""Reference data schemas (topics and categories)."""

from pydantic import BaseModel, ConfigDict, Field


class TopicResponse(BaseModel):
    """A single topic."""

    model_config = ConfigDict(from_attributes=True)

    description: str = Field(description="Topic name shown to users")
    category: str = Field(description="Category the topic is filed under")


class CategoryResponse(BaseModel):
    """A category and the topics filed under it."""

    category: str = Field(description="Category name")
    topics: list[str] = Field(default_factory=list, description="Descriptions of the topics in this category")
