from datetime import datetime

from pydantic import ConfigDict, Field

from cmore_search.models.common import (
    CatalogModel,
    Credit,
    Event,
    ExternalReference,
    Genre,
    Image,
    Keywords,
    LocalizedText,
    Tags,
)


class Team(CatalogModel):
    name: str | None = None
    nid: str | None = None


class OriginalTitle(CatalogModel):
    language: str | None = None
    text: str | None = None
    type: str | None = None


class ParentalRating(CatalogModel):
    country: str | None = None
    system: str | None = None
    value: str | None = None


class LocationRestrictions(CatalogModel):
    include_countries: list[str] = Field(default_factory=list)


class LocationRights(CatalogModel):
    location_restrictions: LocationRestrictions | None = None
    product: str | None = None


class PublicationRights(CatalogModel):
    location_rights: LocationRights | None = None


class Brand(LocalizedText):
    """The brand an asset belongs to, e.g. Idol or Harry Potter."""

    id: str | None = None
    cinemascope: Image | None = None
    country: list[str] = Field(default_factory=list)
    external_references: list[ExternalReference] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    landscape: Image | None = None
    poster: Image | None = None
    studio: str | None = None


class Season(LocalizedText):
    """A season of a brand, e.g. "Idol season 2"."""

    id: str | None = None
    number: int | None = Field(default=None, alias="season_number")
    number_of_episodes: int | None = None
    cinemascope: Image | None = None
    country: list[str] = Field(default_factory=list)
    external_references: list[ExternalReference] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    landscape: Image | None = None
    poster: Image | None = None
    studio: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class Asset(LocalizedText, Keywords):
    type: str
    video_id: str | None = None
    vman_id: str | None = None

    arena: str | None = None
    away_team: Team | None = Field(default=None, alias="awayteam")
    home_team: Team | None = Field(default=None, alias="hometeam")
    logo_away_team: Image | None = Field(default=None, alias="logoawayteam")
    logo_home_team: Image | None = Field(default=None, alias="logohometeam")
    brand: Brand | None = None
    season: Season | None = None
    cinemascope: Image | None = None
    landscape: Image | None = None
    poster: Image | None = None
    content_source: str | None = None
    country: list[str] = Field(default_factory=list)
    credits: list[Credit] = Field(default_factory=list)
    drm_restrictions: bool | None = None
    duration: int | None = None
    episode_number: int | None = None
    events: list[Event] = Field(default_factory=list)
    external_references: list[ExternalReference] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    items_published: bool | None = None
    live: bool | None = None
    live_event_end: datetime | None = None
    mlt_nids: list[str] = Field(default_factory=list)
    original_title: OriginalTitle | None = None
    parental_ratings: list[ParentalRating] = Field(default_factory=list)
    production_year: str | None = None
    publication_rights: PublicationRights | None = None
    spoken_languages: list[str] = Field(default_factory=list)
    studio: str | None = None
    tags: Tags = Field(default_factory=dict)
    timestamp: str | None = None

    @property
    def is_sports_event(self) -> bool:
        return self.home_team is not None or self.away_team is not None
