from __future__ import annotations
import pytest
from oneup import create_app
from oneup.config import TestingConfig
from oneup.extensions import db
from oneup.models import Patient, User


@pytest.fixture(scope="session")
def app():
    app = create_app(TestingConfig())
    yield app


@pytest.fixture(autouse=True)
def clean_db(app):
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_patient(app):
    """Create a patient (optionally owned by a new user); returns (patient_id, user_id)."""
    counter = {"n": 0}

    def _make(with_user: bool = True, first_name: str = "Ana", last_name: str = "Torres"):
        counter["n"] += 1
        with app.app_context():
            user_id = None
            if with_user:
                u = User(username=f"user{counter['n']}", email=f"user{counter['n']}@example.com")
                db.session.add(u)
                db.session.flush()
                user_id = u.id
            p = Patient(first_name=first_name, last_name=last_name, user_id=user_id)
            db.session.add(p)
            db.session.commit()
            return p.id, user_id

    return _make
