"""Per-package manifest Pydantic models.

A package manifest is the package's own ``package.json``. Only the fields
used for enrichment are modelled; everything else is ignored.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    computed_field,
    field_validator,
)


class PersonRef(BaseModel):
    """Object form of a person field, e.g. ``{"name": "Jane", "email": ...}``."""

    model_config = {"extra": "ignore"}

    name: Optional[str] = None


class RepositoryRef(BaseModel):
    """Object form of a repository field, e.g. ``{"type": "git", "url": ...}``."""

    model_config = {"extra": "ignore"}

    url: Optional[str] = None


# A person or repository field is either a plain string or its object form
PersonField = Union[str, PersonRef]
RepositoryField = Union[str, RepositoryRef]


class PackageManifest(BaseModel):
    """Enrichment fields read from a package manifest.

    Each field is validated on its own: a field with an unexpected type is
    read as None and the other fields are kept.
    """

    model_config = {"extra": "ignore"}

    description: Optional[str] = None
    author: Optional[PersonField] = None
    # Kept loose: a well-formed manifest has a list here, but anything is
    # accepted and normalized by the enricher.
    contributors: Optional[Any] = None
    homepage: Optional[str] = None
    repository: Optional[RepositoryField] = None

    @field_validator("description", "author", "homepage", "repository", mode="wrap")
    @classmethod
    def _drop_malformed(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class EnrichedRecord(BaseModel):
    """Package record with display metadata for CSV rendering."""

    model_config = {"extra": "forbid"}

    name: str = Field(description="Package name")
    version: str = Field(default="", description="Package version")
    license_id: str = Field(default="", description="Declared license identifier")
    description: str = Field(default="", description="Package description")
    author: str = Field(default="", description="Author display name")
    contributors: list[str] = Field(
        default_factory=list, description="Contributor display names"
    )
    homepage: str = Field(default="", description="Homepage URL")
    repository_url: str = Field(default="", description="Repository URL")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def everyone(self) -> str:
        """Author followed by contributors, comma-joined."""
        return ",".join([self.author, *self.contributors])

    @computed_field  # type: ignore[prop-decorator]
    @property
    def urls(self) -> str:
        """Homepage and repository URL, comma-joined, blanks dropped."""
        return ",".join(url for url in (self.homepage, self.repository_url) if url)
