import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.core.db import get_session
from app.models import Person
from app.services.person_dao import get_person_store
from sqlmodel import Session, create_engine, SQLModel
from sqlmodel.pool import StaticPool


class RecordingStore:
    """in-memory PersonStore that remembers every call it receives"""

    def __init__(self, people=None):
        self.people = {p.id: p for p in (people or [])}
        self.calls = []
        self._next_id = max(self.people, default=0) + 1

    def index(self):
        self.calls.append(("index",))
        return [self.people[key] for key in sorted(self.people)]

    def show(self, person_id):
        self.calls.append(("show", person_id))
        return self.people.get(person_id)

    def save(self, person):
        self.calls.append(("save", person))
        stored = Person(id=self._next_id, name=person.name, age=person.age, email=person.email)
        self.people[stored.id] = stored
        self._next_id += 1
        return stored

    def update(self, person_id, person):
        self.calls.append(("update", person_id, person))
        if person_id in self.people:
            self.people[person_id] = Person(id=person_id, name=person.name, age=person.age, email=person.email)

    def delete(self, person_id):
        self.calls.append(("delete", person_id))
        self.people.pop(person_id, None)

    def calls_to(self, name):
        return [call for call in self.calls if call[0] == name]


# create in-memory test database
@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="store")
def store_fixture():
    return RecordingStore()


@pytest.fixture(name="store_client")
def store_client_fixture(store: RecordingStore):
    """client whose people routes talk to a RecordingStore instead of the database"""
    app.dependency_overrides[get_person_store] = lambda: store
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
