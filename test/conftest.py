import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from event_registration.core.database import Base, get_db
from event_registration.main import app
from event_registration.services.registration_service import registration_service

class FakeMailer:
    """Records students instead of sending email"""
    
    def __init__(self):
        self.sent = []
    
    def send_registration_email(self, student):
        self.sent.append(student.email)
        return True

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture
def db_session(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def mailer(monkeypatch):
    fake = FakeMailer()
    monkeypatch.setattr(registration_service, "mailer", fake)
    return fake

@pytest.fixture
def client(engine, mailer):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    
    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()
    
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def payload():
    return {
        "name": "Asha Verma",
        "email": "Asha.Verma@Gmail.com ",
        "branch": "CSE",
        "year": "3",
        "phoneNumber": "9876543210",
        "universityRollNo": "22EUCCS001",
        "rollNumber": "22/201",
        "cgpa": "9.4",
    }
