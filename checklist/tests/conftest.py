import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from checklist.app.main import app
from checklist.app.db.session import get_session
from checklist.app.db.models import Artist, Guest, Task

@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
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

@pytest.fixture(name="may_lineup")
def may_lineup_fixture(session: Session):
    """Three lounge sets and one main room set in May, plus an unscheduled artist."""
    artists = [
        Artist(name="Alice Smith", stage_name="DJ Alpha", phone="555-0101", month="May", room="lounge", start_time="22:00",
               social_media="https://instagram.com/djalpha"),
        Artist(name="Bob Jones", month="May", start_time="20:00", phone="555-0102"),
        Artist(name="Cara Diaz", stage_name="Cee", month="May", room="lounge", start_time="23:30"),
        Artist(name="Dan Ford", stage_name="Headliner", month="May", room="main", start_time="23:00", phone="  "),
        Artist(name="Eve Gray", month="May", room="lounge"),
    ]
    for artist in artists:
        session.add(artist)
    session.commit()
    for artist in artists:
        session.refresh(artist)
    return artists

@pytest.fixture(name="may_guests")
def may_guests_fixture(session: Session):
    guests = [
        Guest(name="Zoe Park", guest_of="DJ Alpha", contact="zoe@example.com", month="May"),
        Guest(name="Adam Lee", month="May", room="lounge"),
        Guest(name="Mia Chen", month="May", room="main", contact="555-0199"),
    ]
    for guest in guests:
        session.add(guest)
    session.commit()
    return guests

@pytest.fixture(name="tasks")
def tasks_fixture(session: Session):
    tasks = [
        Task(task="Book sound tech", due_date="2025-05-01", month="May"),
        Task(task="Print flyers", due_date="2025-04-20", due_time="12:00", month="April", complete=True),
        Task(task="Order ice", month="April"),
        Task(task="Email venue", due_date="2025-04-10", month="April"),
    ]
    for task in tasks:
        session.add(task)
    session.commit()
    for task in tasks:
        session.refresh(task)
    return tasks
