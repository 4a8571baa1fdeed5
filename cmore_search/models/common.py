from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

type Locale = Literal["da", "fi", "nb", "sv"]
type DescriptionLength = Literal["tiny", "short", "medium", "long", "extended"]
type Tags = dict[str, list[str]]


class CatalogModel(BaseModel):
    """Base for service payloads: a JSON null decodes to the field default."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields[info.field_name]
        if value is None and not field.is_required():
            return field.get_default(call_default_factory=True)
        return value


class LocalizedImage(CatalogModel):
    caption: str | None = None
    copyright: str | None = None
    language: str | None = None
    url: str | None = None


class Image(CatalogModel):
    caption: str | None = None
    copyright: str | None = None
    localizations: list[LocalizedImage] = Field(default_factory=list)
    url: str | None = None

    def localized(self, language: str) -> LocalizedImage | None:
        return next((i for i in self.localizations if i.language == language), None)


class Credit(CatalogModel):
    function: str | None = None
    nid: str | None = None
    name: str | None = None
    rolename: str | None = None


class Event(CatalogModel):
    """Publication window of an asset on a site."""

    site: str | None = None
    device_types: list[str] = Field(default_factory=list)
    products: list[str] = Field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    publish_time: datetime | None = None


class ExternalReference(CatalogModel):
    locator: str | None = None
    type: str | None = None
    value: str | None = None


class Genre(CatalogModel):
    main: str | None = None
    sub: list[str] = Field(default_factory=list)


class LocalizedText(CatalogModel):
    title_da: str | None = None
    title_fi: str | None = None
    title_nb: str | None = None
    title_sv: str | None = None

    description_tiny_da: str | None = None
    description_tiny_fi: str | None = None
    description_tiny_nb: str | None = None
    description_tiny_sv: str | None = None
    description_short_da: str | None = None
    description_short_fi: str | None = None
    description_short_nb: str | None = None
    description_short_sv: str | None = None
    description_medium_da: str | None = None
    description_medium_fi: str | None = None
    description_medium_nb: str | None = None
    description_medium_sv: str | None = None
    description_long_da: str | None = None
    description_long_fi: str | None = None
    description_long_nb: str | None = None
    description_long_sv: str | None = None
    description_extended_da: str | None = None
    description_extended_fi: str | None = None
    description_extended_nb: str | None = None
    description_extended_sv: str | None = None

    def title(self, locale: Locale) -> str | None:
        return getattr(self, f"title_{locale}")

    def description(self, locale: Locale, length: DescriptionLength = "medium") -> str | None:
        return getattr(self, f"description_{length}_{locale}")


class Keywords(CatalogModel):
    model_config = ConfigDict(populate_by_name=True)

    # The Danish keyword list is sent as "keywords_dk"
    keywords_da: list[str] = Field(default_factory=list, alias="keywords_dk")
    keywords_fi: list[str] = Field(default_factory=list)
    keywords_nb: list[str] = Field(default_factory=list)
    keywords_sv: list[str] = Field(default_factory=list)
