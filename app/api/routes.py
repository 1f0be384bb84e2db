# app/api/routes.py

from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from app.api.greetings import root, world
from app.api.people import list_people
from app.models.people import Person

# (method, path, handler, response_class, response_model), registered in order
ROUTES = [
    ("GET", "/", root, PlainTextResponse, None),
    ("GET", "/people", list_people, JSONResponse, List[Person]),
    ("GET", "/world", world, PlainTextResponse, None),
]

router = APIRouter()

for method, path, handler, response_class, response_model in ROUTES:
    router.add_api_route(
        path,
        handler,
        methods=[method],
        response_class=response_class,
        response_model=response_model,
    )
