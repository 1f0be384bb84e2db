# app/models/people.py

from typing import Optional

from pydantic import BaseModel, Field


class Person(BaseModel):
    name: str
    age: int = Field(..., ge=0)
    favourite_food: Optional[str] = None
