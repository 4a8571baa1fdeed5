from pydantic import Field

from cmore_search.models.common import (
    Credit,
    Event,
    ExternalReference,
    Genre,
    Image,
    Keywords,
    LocalizedText,
    Tags,
)


class Series(LocalizedText, Keywords):
    type: str
    id: str | None = None
    brand_id: str | None = None
    seasons: list[int] = Field(default_factory=list)

    cinemascope: Image | None = None
    landscape: Image | None = None
    poster: Image | None = None
    content_source: str | None = None
    country: list[str] = Field(default_factory=list)
    credits: list[Credit] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    external_references: list[ExternalReference] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    spoken_languages: list[str] = Field(default_factory=list)
    studio: str | None = None
    tags: Tags = Field(default_factory=dict)
    timestamp: str | None = None
