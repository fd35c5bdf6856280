"""
Test configuration for the hospital accounts API.
"""
import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import cloudinary.uploader
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

import database
from main import app


@pytest.fixture(scope="function")
def client(monkeypatch):
    """
    Create a test client backed by a fresh in-memory MongoDB.
    """
    monkeypatch.setattr(database, "get_client", lambda: AsyncMongoMockClient())

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}


@pytest.fixture
def uploads(monkeypatch):
    """
    Replace the Cloudinary upload call and record what was uploaded.
    """
    calls = []

    def fake_upload(file, **options):
        calls.append(options)
        return {
            "public_id": f"doctor_avatars/avatar{len(calls)}",
            "secure_url": f"https://res.cloudinary.com/demo/avatar{len(calls)}.png",
        }

    monkeypatch.setattr(cloudinary.uploader, "upload", fake_upload)
    return calls


@pytest.fixture
def destroyed(monkeypatch):
    """
    Replace the Cloudinary destroy call and record deleted public ids.
    """
    public_ids = []

    def fake_destroy(public_id, **options):
        public_ids.append(public_id)
        return {"result": "ok"}

    monkeypatch.setattr(cloudinary.uploader, "destroy", fake_destroy)
    return public_ids


def person(**overrides):
    data = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "03001234567",
        "nic": "4210112345671",
        "dob": "10/12/1990",
        "gender": "Female",
        "password": "s3cret-pass",
    }
    data.update(overrides)
    return data


@pytest.fixture
def patient_data():
    return person()


@pytest.fixture
def doctor_data():
    return person(
        firstName="Gregory",
        lastName="House",
        email="house@example.com",
        phone="03007654321",
        gender="Male",
        doctorDepartment="Diagnostics",
    )
