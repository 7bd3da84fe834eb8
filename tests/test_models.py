"""Tests des modèles et schémas / Model and schema tests."""

import pytest
from pydantic import ValidationError

from country_directory.models.country import Country
from country_directory.schemas.country import MAX_COUNTRY_ID, CountryCreate, CountryRead, CountryUpdate


def test_country_repr():
    c = Country(pk=1, id_country=1, name="France", capital="Paris")
    assert repr(c) == "<Country 1 - France>"


def test_read_dumps_id_country_alias():
    c = CountryRead(id=1, name="France", capital="Paris")
    assert c.model_dump(by_alias=True) == {"name": "France", "capital": "Paris", "idCountry": 1}


def test_read_from_orm_row():
    row = Country(pk=7, id_country=3, name="Japan", capital="Tokyo")
    assert CountryRead.from_orm_row(row) == CountryRead(id=3, name="Japan", capital="Tokyo")


def test_read_is_immutable():
    c = CountryRead(id=1, name="France", capital="Paris")
    with pytest.raises(ValidationError):
        c.capital = "Lyon"


def test_create_accepts_id_country_or_missing_id():
    assert CountryCreate.model_validate({"idCountry": 5, "name": "Peru", "capital": "Lima"}).id == 5
    assert CountryCreate.model_validate({"name": "Peru", "capital": "Lima"}).id is None


def test_create_strips_whitespace():
    c = CountryCreate.model_validate({"name": "  Chile ", "capital": "Santiago "})
    assert c.name == "Chile"
    assert c.capital == "Santiago"


@pytest.mark.parametrize(
    "payload",
    [
        {"capital": "Paris"},
        {"name": "France"},
        {"name": "", "capital": "Paris"},
        {"name": "   ", "capital": "Paris"},
        {"name": "France", "capital": "x" * 101},
        {"idCountry": 0, "name": "France", "capital": "Paris"},
        {"idCountry": "abc", "name": "France", "capital": "Paris"},
        {"idCountry": 2**63, "name": "France", "capital": "Paris"},
    ],
)
def test_create_rejects_invalid_payload(payload):
    with pytest.raises(ValidationError):
        CountryCreate.model_validate(payload)


def test_update_requires_name_and_capital():
    with pytest.raises(ValidationError):
        CountryUpdate.model_validate({"name": "France"})


def test_create_accepts_largest_bigint_id():
    c = CountryCreate.model_validate({"idCountry": 2**63 - 1, "name": "France", "capital": "Paris"})
    assert c.id == MAX_COUNTRY_ID
