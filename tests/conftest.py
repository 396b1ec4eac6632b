"""Shared fixtures: a throwaway SQLite store and a TestClient per test."""

import os
import tempfile
from pathlib import Path

# Must be set before carwash.database is imported
_DB_DIR = tempfile.mkdtemp(prefix="carwash-tests-")
os.environ["CARWASH_DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["CARWASH_SEED_SERVICES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from main import app
from carwash.database import Base, SessionLocal, engine
from carwash.database_models import User, Vehicle, Service, Booking
from carwash.auth_utils import create_default_services_if_missing, get_password_hash

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    create_default_services_if_missing()
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def create_user(email="budi@example.com", full_name="Budi"):
    db = SessionLocal()
    try:
        user = User(email=email, password_hash=get_password_hash(PASSWORD), full_name=full_name)
        db.add(user)
        db.commit()
        return user.id
    finally:
        db.close()


def create_vehicle(user_id, plate_number="B 1234 XYZ", brand="Toyota", model="Avanza", vehicle_type="MPV"):
    db = SessionLocal()
    try:
        vehicle = Vehicle(
            user_id=user_id, brand=brand, model=model,
            plate_number=plate_number, vehicle_type=vehicle_type
        )
        db.add(vehicle)
        db.commit()
        return vehicle.id
    finally:
        db.close()


def create_booking(user_id, vehicle_id, service_id, booking_date, booking_time="10:00", status="pending"):
    db = SessionLocal()
    try:
        booking = Booking(
            user_id=user_id, vehicle_id=vehicle_id, service_id=service_id,
            booking_date=booking_date, booking_time=booking_time, status=status
        )
        db.add(booking)
        db.commit()
        return booking.id
    finally:
        db.close()


def service_id_by_name(name):
    db = SessionLocal()
    try:
        return db.query(Service).filter(Service.name == name).one().id
    finally:
        db.close()


def all_bookings():
    db = SessionLocal()
    try:
        return db.query(Booking).all()
    finally:
        db.close()


def login(test_client, email="budi@example.com"):
    response = test_client.post(
        "/login", data={"email": email, "password": PASSWORD}, follow_redirects=False
    )
    assert response.status_code == 303
    return response


@pytest.fixture
def user_id():
    return create_user()


@pytest.fixture
def auth_client(client, user_id):
    login(client)
    return client


class BrokenSession:
    """Session stand-in whose every query fails like an unreachable store."""

    def query(self, *args, **kwargs):
        raise SQLAlchemyError("data store unavailable")

    def add(self, obj):
        pass

    def commit(self):
        raise SQLAlchemyError("data store unavailable")

    def rollback(self):
        pass

    def close(self):
        pass
