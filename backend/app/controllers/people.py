"""
people form controller

every operation returns either a RenderView (template token plus the values
bound into it) or a Redirect. the http layer in app.api.v1.people turns those
into responses, so the controller itself can be exercised without a server.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from app.core.errors import PersonNotFoundError
from app.core.logging_config import get_logger
from app.forms.person import parse_person_form
from app.models import Person
from app.services.person_dao import PersonStore

logger = get_logger(__name__)

PEOPLE_PATH = "/people"


@dataclass
class RenderView:
    token: str
    bindings: Dict[str, Any] = field(default_factory=dict)
    status_code: int = 200


@dataclass
class Redirect:
    path: str


ControllerResult = Union[RenderView, Redirect]


class PeopleController:
    def __init__(self, store: PersonStore):
        self.store = store

    def list(self) -> RenderView:
        return RenderView("people/index", {"people": self.store.index()})

    def get_one(self, person_id: int) -> RenderView:
        return RenderView("people/show", {"person": self._require(person_id)})

    def new_form(self) -> RenderView:
        return RenderView("people/new", {"person": Person(), "errors": {}})

    def create(self, form_data: Mapping[str, str]) -> ControllerResult:
        result = parse_person_form(form_data)
        if not result.is_valid:
            logger.info(f"rejected new person: {result.errors_by_field()}")
            return RenderView(
                "people/new",
                {"person": result.submitted_person(), "errors": result.errors_by_field()},
                status_code=422,
            )

        person = self.store.save(result.form.to_person())
        logger.info(f"created person {person.id}")
        return Redirect(PEOPLE_PATH)

    def edit_form(self, person_id: int) -> RenderView:
        return RenderView("people/edit", {"person": self._require(person_id), "errors": {}})

    def update(self, form_data: Mapping[str, str], person_id: int) -> ControllerResult:
        result = parse_person_form(form_data)
        if not result.is_valid:
            logger.info(f"rejected update of person {person_id}: {result.errors_by_field()}")
            return RenderView(
                "people/edit",
                {"person": result.submitted_person(person_id), "errors": result.errors_by_field()},
                status_code=422,
            )

        self.store.update(person_id, result.form.to_person())
        logger.info(f"updated person {person_id}")
        return Redirect(PEOPLE_PATH)

    def delete(self, person_id: int) -> Redirect:
        # no existence check, deleting a missing id still lands on the list
        self.store.delete(person_id)
        logger.info(f"deleted person {person_id}")
        return Redirect(PEOPLE_PATH)

    def _require(self, person_id: int) -> Person:
        person = self.store.show(person_id)
        if person is None:
            raise PersonNotFoundError(person_id)
        return person
