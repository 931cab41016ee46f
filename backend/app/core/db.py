from sqlmodel import SQLModel, Session, create_engine
from app.core.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # sessions are handed across the threadpool that runs sync endpoints
    connect_args["check_same_thread"] = False

engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, connect_args=connect_args)


def init_db():
    # make sure table classes are registered on the metadata
    import app.models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
