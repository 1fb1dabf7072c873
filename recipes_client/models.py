"""
Record models for the recipe backend.

This module defines the pydantic schemas for the records the client reads from and
writes to the hosted backend. The record shapes are owned by the backend; these models
only describe the fields the dashboard relies on and keep everything else as extra data.

# NOTE: The backend returns camelCase keys (createdAt, currentPage, ...). Fields are
    declared with snake_case names and camelCase aliases, and populate_by_name lets
    tests and callers use either form.

Field expectations:
- Recipe list responses are paginated envelopes with author and categories expanded
- Create responses echo the stored record; relations come back as bare ids
- Photo values are keyed by size name (thumbnail, medium, ...) with a url per size
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

STATUS_DRAFT = "draft"
STATUS_PUBLISHED = "published"

RecordId = Union[int, str]


class User(BaseModel):
    """Authenticated user record. Read-only for the client."""
    id: RecordId = Field(..., description="User identifier")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Login email")

    model_config = ConfigDict(extra="allow")


class Category(BaseModel):
    """Recipe category record."""
    id: RecordId = Field(..., description="Category identifier")
    name: Optional[str] = Field(None, description="Category name")

    model_config = ConfigDict(extra="allow")


class PhotoSize(BaseModel):
    """One rendered size of an uploaded image."""
    url: Optional[str] = Field(None, description="Public URL of this image size")

    model_config = ConfigDict(extra="allow")


class Photo(BaseModel):
    """
    Uploaded recipe photo.

    The backend stores one entry per configured size. Sizes may arrive either as
    objects with a url or as bare URL strings.
    """
    thumbnail: Optional[Union[PhotoSize, str]] = Field(None, description="Thumbnail size")

    model_config = ConfigDict(extra="allow")

    @property
    def thumbnail_url(self) -> Optional[str]:
        if isinstance(self.thumbnail, str):
            return self.thumbnail or None
        if self.thumbnail is not None:
            return self.thumbnail.url or None
        return None


class Recipe(BaseModel):
    """
    Recipe record as returned by the backend.

    `author` is an expanded User when the query asked for the relation, otherwise the
    bare author id. The same holds for each entry of `categories`.
    """
    id: RecordId = Field(..., description="Recipe identifier")
    title: str = Field(..., description="Recipe title")
    description: Optional[str] = Field(None, description="Short description (may contain HTML)")
    ingredients: Optional[str] = Field(None, description="Free-text ingredient list")
    instructions: Optional[str] = Field(None, description="Free-text preparation steps")
    status: str = Field(STATUS_DRAFT, description="Publication status: 'draft' or 'published'")
    author: Optional[Union[User, RecordId]] = Field(None, description="Author (expanded or id)")
    categories: List[Union[Category, RecordId]] = Field(default_factory=list, description="Categories (expanded or ids)")
    photo: Optional[Photo] = Field(None, description="Uploaded photo, if any")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("categories", mode="before")
    @classmethod
    def _none_categories_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def is_published(self) -> bool:
        return self.status == STATUS_PUBLISHED

    @property
    def author_id(self) -> Optional[RecordId]:
        if isinstance(self.author, User):
            return self.author.id
        return self.author

    @property
    def author_name(self) -> Optional[str]:
        """Author display name, only available when the relation was expanded."""
        if isinstance(self.author, User):
            return self.author.name or None
        return None


class RecipeDraft(BaseModel):
    """Payload for creating a recipe."""
    title: str = Field(..., description="Recipe title (required)")
    description: str = Field("", description="Short description")
    ingredients: str = Field("", description="Free-text ingredient list")
    instructions: str = Field("", description="Free-text preparation steps")
    author: Optional[RecordId] = Field(None, description="Author user id")
    status: str = Field(STATUS_PUBLISHED, description="Publication status")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("title must not be blank")
        return value

    def to_payload(self) -> Dict[str, Any]:
        """Request body for the create endpoint. Omits an unset author."""
        return self.model_dump(exclude_none=True)


class RecipePage(BaseModel):
    """Paginated list envelope returned by collection queries."""
    data: List[Recipe] = Field(default_factory=list)
    current_page: Optional[int] = Field(None, alias="currentPage")
    last_page: Optional[int] = Field(None, alias="lastPage")
    from_index: Optional[int] = Field(None, alias="from")
    to_index: Optional[int] = Field(None, alias="to")
    total: Optional[int] = None
    per_page: Optional[int] = Field(None, alias="perPage")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ConnectionResult(BaseModel):
    """Outcome of the backend connectivity probe."""
    success: bool
    error: Optional[str] = None
