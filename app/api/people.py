# app/api/people.py

from typing import List

from app.models.people import Person


def list_people() -> List[Person]:
    """
    Return the fixed list of people, built fresh on every call.
    """
    return [
        Person(name="Person A", age=36, favourite_food="Pizza"),
        Person(name="Person B", age=5, favourite_food="Broccoli"),
        Person(name="Person C", age=100),
    ]
