"""Schémas Pays / Country schemas.

Le JSON public utilise la cle ``idCountry`` / Public JSON uses the ``idCountry`` key.
"""

from pydantic import BaseModel, ConfigDict, Field

NAME_MAX_LENGTH = 100
# Plage BIGINT signe / Signed BIGINT range
MAX_COUNTRY_ID = 2**63 - 1


class CountryBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    capital: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)


class CountryCreate(CountryBase):
    # Absent = attribue par le stockage / Missing = assigned by the store
    id: int | None = Field(default=None, alias="idCountry", ge=1, le=MAX_COUNTRY_ID)


class CountryUpdate(CountryBase):
    # Doit egaler l'id du chemin s'il est fourni / Must match the path id if given
    id: int | None = Field(default=None, alias="idCountry", ge=1, le=MAX_COUNTRY_ID)


class CountryRead(CountryBase):
    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )

    id: int = Field(alias="idCountry")

    @classmethod
    def from_orm_row(cls, row) -> "CountryRead":
        """Convertir une ligne ORM / Convert an ORM row."""
        return cls(id=row.id_country, name=row.name, capital=row.capital)


class ErrorRead(BaseModel):
    """Corps d'erreur / Error body."""

    error: str
    message: str
    details: list[dict] | None = None
