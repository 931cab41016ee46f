from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from app.controllers.people import PeopleController
from app.core.templating import to_response
from app.services.person_dao import PersonStore, get_person_store

router = APIRouter()

# ids must fit a signed 64-bit INTEGER column
MAX_PERSON_ID = 2**63 - 1
PersonId = Annotated[int, Path(gt=0, le=MAX_PERSON_ID, description="positive person id")]


def get_controller(store: PersonStore = Depends(get_person_store)) -> PeopleController:
    return PeopleController(store)


async def read_form(request: Request) -> dict:
    """raw submitted form fields as plain strings"""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def list_people(request: Request, controller: PeopleController = Depends(get_controller)):
    return to_response(request, controller.list())


def new_person(request: Request, controller: PeopleController = Depends(get_controller)):
    return to_response(request, controller.new_form())


def show_person(request: Request, person_id: PersonId, controller: PeopleController = Depends(get_controller)):
    return to_response(request, controller.get_one(person_id))


def create_person(
    request: Request,
    form: dict = Depends(read_form),
    controller: PeopleController = Depends(get_controller),
):
    return to_response(request, controller.create(form))


def edit_person(request: Request, person_id: PersonId, controller: PeopleController = Depends(get_controller)):
    return to_response(request, controller.edit_form(person_id))


def update_person(
    request: Request,
    person_id: PersonId,
    form: dict = Depends(read_form),
    controller: PeopleController = Depends(get_controller),
):
    return to_response(request, controller.update(form, person_id))


def delete_person(request: Request, person_id: PersonId, controller: PeopleController = Depends(get_controller)):
    return to_response(request, controller.delete(person_id))


# method, path, handler; "/new" has to be matched before "/{person_id}"
ROUTES = [
    ("GET", "", list_people),
    ("GET", "/new", new_person),
    ("GET", "/{person_id}", show_person),
    ("POST", "", create_person),
    ("GET", "/{person_id}/edit", edit_person),
    ("PATCH", "/{person_id}", update_person),
    ("DELETE", "/{person_id}", delete_person),
]

for method, path, endpoint in ROUTES:
    router.add_api_route(
        path,
        endpoint,
        methods=[method],
        name=endpoint.__name__,
        include_in_schema=False,
    )
