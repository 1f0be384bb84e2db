import pytest
from pydantic import ValidationError

from app.api.people import list_people
from app.models.people import Person


def test_favourite_food_defaults_to_none():
    person = Person(name="Someone", age=1)

    assert person.favourite_food is None


def test_empty_food_is_not_none():
    person = Person(name="Someone", age=1, favourite_food="")

    assert person.favourite_food == ""


def test_negative_age_is_rejected():
    with pytest.raises(ValidationError):
        Person(name="Someone", age=-1)


def test_list_people_builds_new_objects_each_call():
    first = list_people()
    second = list_people()

    assert first == second
    assert first[0] is not second[0]
    assert [p.name for p in first] == ["Person A", "Person B", "Person C"]
