from typing import Annotated, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

NOT_AVAILABLE = "N/A"
UNKNOWN_REQUIREMENT = "unknown (verify with official source)"
PLACEHOLDER_PROCESS = (
    "Check the official immigration website or contact the local embassy or consulate."
)
PLACEHOLDER_DOCUMENTS = "Prepare documents according to the official requirements."


def _field(*aliases: str):
    # First alias is the canonical wire name
    return Field(
        None,
        validation_alias=AliasChoices(*aliases),
        serialization_alias=aliases[0],
    )


class CountryVisaRecord(BaseModel):
    """Canonical visa entry for one country or territory.

    Older data files spell the keys differently (``name_en``,
    ``countryNameEn``, ``regionZh`` ...). Those spellings are accepted on
    load and always emitted under the camelCase names.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | int | None = None
    code: str | None = None
    name_local: str | None = _field("nameLocal", "name_zh", "nameZh", "countryName", "name")
    name_english: str | None = _field("nameEnglish", "name_en", "nameEn", "countryNameEn")
    region: str | None = _field("region", "regionZh", "region_zh", "regionEn", "region_en")
    visa_requirement: str | None = _field("visaRequirement", "visa_requirement", "visa")
    stay_days: str | None = _field("stayDays", "stay_days", "stay")
    notes: str | None = None
    process: str | None = None
    documents: str | None = None
    fee: str | None = None
    official_link: str | None = _field("officialLink", "official_link", "link")

    @field_validator("stay_days", "fee", mode="before")
    @classmethod
    def number_to_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @model_validator(mode="after")
    def require_name(self):
        if not (self.name_local or self.name_english):
            raise ValueError("record needs nameLocal or nameEnglish")
        return self

    @property
    def display_name(self) -> str:
        return self.name_local or self.name_english


def _or_na(value: str | None) -> str:
    if value is None or not str(value).strip():
        return NOT_AVAILABLE
    return value


class VisaInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    country_name: str
    code: str = NOT_AVAILABLE
    region: str = NOT_AVAILABLE
    visa_requirement: str = NOT_AVAILABLE
    stay_days: str = NOT_AVAILABLE
    notes: str = NOT_AVAILABLE
    process: str = NOT_AVAILABLE
    documents: str = NOT_AVAILABLE
    fee: str = NOT_AVAILABLE
    official_link: str = NOT_AVAILABLE


class VerifiedVisaInfo(VisaInfo):
    source: Literal["verified"] = "verified"

    @classmethod
    def from_record(cls, record: CountryVisaRecord) -> "VerifiedVisaInfo":
        return cls(
            country_name=record.display_name,
            code=_or_na(record.code),
            region=_or_na(record.region),
            visa_requirement=_or_na(record.visa_requirement),
            stay_days=_or_na(record.stay_days),
            notes=_or_na(record.notes),
            process=_or_na(record.process),
            documents=_or_na(record.documents),
            fee=_or_na(record.fee),
            official_link=_or_na(record.official_link),
        )


class PlaceholderVisaInfo(VisaInfo):
    """Stand-in for a country known to the reference table but missing from
    the visa data. Never mistake it for verified information."""

    source: Literal["placeholder"] = "placeholder"
    visa_requirement: str = UNKNOWN_REQUIREMENT
    process: str = PLACEHOLDER_PROCESS
    documents: str = PLACEHOLDER_DOCUMENTS


VisaLookup = Annotated[
    Union[VerifiedVisaInfo, PlaceholderVisaInfo],
    Field(discriminator="source"),
]
