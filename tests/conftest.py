"""Pytest fixtures and configuration for rehabNow tests."""

import pytest
from datetime import datetime
from fastapi.testclient import TestClient


@pytest.fixture
def sample_week():
    """Raw weekly schedule as the recognition webhook sends it."""
    return {
        "Lunes": "09:00-Fisioterapia-Sala A, 10:30-Hidroterapia-Piscina, 12:00-Terapia Ocupacional-Sala B",
        "Martes": "09:30-Ejercicios-Gimnasio, 14:00-Evaluación-Sala C",
        "Miércoles": "09:00-Fisioterapia-Sala A, 14:00-Hidroterapia",
        "Jueves": "10:00-Terapia Ocupacional-Sala B",
        "Viernes": "11:00-Rehabilitación-Sala A, 16:00-Ejercicios",
        "Sábado": "Descanso",
        "Domingo": "",
    }


@pytest.fixture
def monday_morning():
    """Fixed reference instant: Monday 2026-10-19 09:10."""
    return datetime(2026, 10, 19, 9, 10)


@pytest.fixture
def schedule_payload(sample_week):
    """Schedule data block of a user_found webhook payload."""
    return {"PatientID": "P-001", "Nombre": "Lucía", **sample_week}


@pytest.fixture
def user_found_payload(schedule_payload):
    """Full user_found webhook payload."""
    return {
        "status": "user_found",
        "message": "Usuario reconocido",
        "personId": "person-42",
        "similarity": 0.93,
        "confidence": 0.88,
        "scheduleData": schedule_payload,
    }


@pytest.fixture
def test_client():
    """Create a FastAPI test client."""
    from rehabnow.api.app import app

    with TestClient(app) as client:
        yield client
