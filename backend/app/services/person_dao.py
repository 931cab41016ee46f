"""
person data access object

the controller only talks to the PersonStore protocol; SqlPersonStore is the
sqlmodel-backed implementation wired in through get_person_store.
"""
from typing import List, Optional, Protocol

from fastapi import Depends
from sqlmodel import Session, select

from app.core.db import get_session
from app.core.logging_config import get_logger
from app.models import Person

logger = get_logger(__name__)


class PersonStore(Protocol):
    def index(self) -> List[Person]: ...

    def show(self, person_id: int) -> Optional[Person]: ...

    def save(self, person: Person) -> Person: ...

    def update(self, person_id: int, person: Person) -> None: ...

    def delete(self, person_id: int) -> None: ...


class SqlPersonStore:
    def __init__(self, session: Session):
        self.session = session

    def index(self) -> List[Person]:
        """all people ordered by id"""
        return list(self.session.exec(select(Person).order_by(Person.id)).all())

    def show(self, person_id: int) -> Optional[Person]:
        return self.session.get(Person, person_id)

    def save(self, person: Person) -> Person:
        """insert a new person, the database assigns the id"""
        db_person = Person(name=person.name, age=person.age, email=person.email)
        self.session.add(db_person)
        self.session.commit()
        self.session.refresh(db_person)
        logger.debug(f"inserted person {db_person.id}")
        return db_person

    def update(self, person_id: int, person: Person) -> None:
        db_person = self.session.get(Person, person_id)
        if not db_person:
            logger.debug(f"update skipped, person {person_id} does not exist")
            return
        db_person.name = person.name
        db_person.age = person.age
        db_person.email = person.email
        self.session.add(db_person)
        self.session.commit()

    def delete(self, person_id: int) -> None:
        db_person = self.session.get(Person, person_id)
        if not db_person:
            logger.debug(f"delete skipped, person {person_id} does not exist")
            return
        self.session.delete(db_person)
        self.session.commit()


def get_person_store(session: Session = Depends(get_session)) -> PersonStore:
    return SqlPersonStore(session)
