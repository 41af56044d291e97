from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CountryReference(BaseModel):
    """One row of the lightweight countries table (no visa details)."""

    model_config = ConfigDict(populate_by_name=True)

    code: str | None = None
    name_english: str | None = Field(
        None,
        validation_alias=AliasChoices("nameEnglish", "name_en", "nameEn"),
        serialization_alias="nameEnglish",
    )
    name_local: str | None = Field(
        None,
        validation_alias=AliasChoices("nameLocal", "name_zh", "nameZh"),
        serialization_alias="nameLocal",
    )

    @model_validator(mode="after")
    def require_identifier(self):
        if not (self.code or self.name_english or self.name_local):
            raise ValueError("country reference needs a code or a name")
        return self

    @property
    def lookup_keys(self) -> tuple[str | None, ...]:
        return (self.name_english, self.name_local, self.code)


class CountrySummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name_local: str | None = None
    name_english: str | None = None
    region: str | None = None
