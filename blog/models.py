"""Post data types shared by the API, the repository and the test suite."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Fields every serialized post carries, no more and no fewer
POST_FIELDS = frozenset({"id", "title", "author", "content", "created"})

# Fields a PUT is allowed to change
MUTABLE_FIELDS = ("title", "content", "author")


class AuthorName(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)

    @property
    def display(self) -> str:
        return f"{self.first_name} {self.last_name}"


class PostInput(BaseModel):
    """Body of POST /posts."""
    title: str = Field(min_length=1)
    author: AuthorName
    content: str = Field(min_length=1)


class PostUpdate(BaseModel):
    """Body of PUT /posts/{id}. Every field is optional."""
    id: Optional[str] = None
    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[AuthorName] = None
    content: Optional[str] = Field(default=None, min_length=1)

    def changes(self) -> dict:
        """Mutable fields actually present in the request."""
        return {
            name: getattr(self, name)
            for name in MUTABLE_FIELDS
            if name in self.model_fields_set and getattr(self, name) is not None
        }


class PostOut(BaseModel):
    """Public representation of a post."""
    model_config = ConfigDict(extra="forbid")

    id: str
    title: str
    author: str
    content: str
    created: datetime


class Post(BaseModel):
    """A stored post."""
    id: str
    title: str
    author: AuthorName
    content: str
    created: datetime

    @property
    def author_name(self) -> str:
        return self.author.display

    def serialize(self) -> dict:
        return PostOut(
            id=self.id,
            title=self.title,
            author=self.author_name,
            content=self.content,
            created=self.created,
        ).model_dump(mode="json")
