import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
import logging
import sys
from pathlib import Path
from uuid import uuid4

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hospital_registry.main import app
from hospital_registry.api.deps import get_registry, RecordNotFoundError
from hospital_registry.core.config import settings
from hospital_registry.services.registry import HospitalRegistry

@pytest.fixture
def registry():
    return HospitalRegistry(name="Test Hospital", appointment_price=25.0)

@pytest.fixture
def client(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()

# Test data
martin_data = {"name": "Martin", "specialization": "Cardiology"}
bernard_data = {"name": "Bernard", "specialization": "Neurology"}
dupont_data = {"name": "Dupont", "gender": "F", "date_of_birth": "1980-04-12"}

class TestDoctors:

    def test_add_doctor(self, client, registry):
        """Test doctor registration."""
        response = client.post("/api/v1/doctors", json=martin_data)
        assert response.status_code == 201

        data = response.json()
        assert data["kind"] == "doctor"
        assert data["name"] == "Martin"
        assert data["specialization"] == "Cardiology"
        assert "id" in data
        assert registry.doctor_count == 1

    def test_add_doctor_missing_specialization(self, client):
        """Test doctor registration without a specialization."""
        response = client.post("/api/v1/doctors", json={"name": "Martin"})
        assert response.status_code == 422

    def test_add_doctor_empty_name(self, client):
        response = client.post("/api/v1/doctors", json={"name": "", "specialization": "Cardiology"})
        assert response.status_code == 422

    def test_add_doctor_blank_fields(self, client, registry):
        """Test that whitespace-only name or specialization is rejected."""
        response = client.post("/api/v1/doctors", json={"name": "   ", "specialization": "Cardiology"})
        assert response.status_code == 422

        response = client.post("/api/v1/doctors", json={"name": "Martin", "specialization": " \t"})
        assert response.status_code == 422
        assert registry.doctor_count == 0

    def test_add_doctor_strips_whitespace(self, client):
        response = client.post("/api/v1/doctors", json={"name": " Martin ", "specialization": "Cardiology "})
        assert response.status_code == 201
        assert response.json()["name"] == "Martin"
        assert response.json()["specialization"] == "Cardiology"

    def test_list_doctors_in_insertion_order(self, client):
        """Test listing doctors."""
        client.post("/api/v1/doctors", json=martin_data)
        client.post("/api/v1/doctors", json=bernard_data)

        response = client.get("/api/v1/doctors")
        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Martin", "Bernard"]

    def test_doctor_listing_text(self, client):
        client.post("/api/v1/doctors", json=martin_data)

        response = client.get("/api/v1/doctors/listing")
        assert response.status_code == 200
        assert response.json() == {"count": 1, "listing": "Dr Martin (Cardiology)\n"}

    def test_search_by_specialization(self, client):
        """Test exact specialization search."""
        client.post("/api/v1/doctors", json=martin_data)
        client.post("/api/v1/doctors", json=bernard_data)
        client.post("/api/v1/doctors", json={"name": "Leroy", "specialization": "cardiology"})

        response = client.get("/api/v1/doctors/search", params={"specialization": "Cardiology"})
        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Martin"]

    def test_get_doctor(self, client):
        doctor_id = client.post("/api/v1/doctors", json=martin_data).json()["id"]

        response = client.get(f"/api/v1/doctors/{doctor_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Martin"

    def test_get_unknown_doctor(self, client):
        """Test fetching a doctor that does not exist."""
        response = client.get(f"/api/v1/doctors/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"

    def test_remove_doctor(self, client, registry):
        doctor_id = client.post("/api/v1/doctors", json=martin_data).json()["id"]

        response = client.delete(f"/api/v1/doctors/{doctor_id}")
        assert response.status_code == 200
        assert response.json() == {"removed": True}
        assert registry.doctor_count == 0

    def test_remove_unknown_doctor_is_noop(self, client, registry):
        """Test removing a doctor that is not registered."""
        client.post("/api/v1/doctors", json=martin_data)

        response = client.delete(f"/api/v1/doctors/{uuid4()}")
        assert response.status_code == 200
        assert response.json() == {"removed": False}
        assert registry.doctor_count == 1

class TestPatients:

    def test_add_and_list_patients(self, client):
        """Test patient registration and listing."""
        response = client.post("/api/v1/patients", json=dupont_data)
        assert response.status_code == 201
        assert response.json()["kind"] == "patient"
        assert response.json()["date_of_birth"] == "1980-04-12"

        response = client.get("/api/v1/patients")
        assert [p["name"] for p in response.json()] == ["Dupont"]

    def test_patient_listing_text(self, client):
        client.post("/api/v1/patients", json=dupont_data)
        response = client.get("/api/v1/patients/listing")
        assert response.json() == {"count": 1, "listing": "Dupont\n"}

    def test_remove_patient(self, client, registry):
        patient_id = client.post("/api/v1/patients", json=dupont_data).json()["id"]

        assert client.delete(f"/api/v1/patients/{patient_id}").json() == {"removed": True}
        assert client.delete(f"/api/v1/patients/{patient_id}").json() == {"removed": False}
        assert registry.patient_count == 0

    def test_add_patient_blank_name(self, client, registry):
        """Test patient registration with a whitespace-only name."""
        response = client.post("/api/v1/patients", json={"name": "   "})
        assert response.status_code == 422
        assert registry.patient_count == 0

    def test_get_unknown_patient(self, client):
        response = client.get(f"/api/v1/patients/{uuid4()}")
        assert response.status_code == 404

class TestPeople:

    def test_search_by_name_doctors_first(self, client):
        """Test name search across doctors and patients."""
        client.post("/api/v1/patients", json={"name": "Dupont"})
        client.post("/api/v1/doctors", json={"name": "Dupont", "specialization": "Cardiology"})

        response = client.get("/api/v1/people/search", params={"name": "Dupont"})
        assert response.status_code == 200
        assert [p["kind"] for p in response.json()] == ["doctor", "patient"]

    def test_search_by_name_no_match(self, client):
        response = client.get("/api/v1/people/search", params={"name": "Nobody"})
        assert response.status_code == 200
        assert response.json() == []

    def test_general_search_not_implemented(self, client):
        """Test that general search reports itself as unsupported."""
        response = client.get("/api/v1/people/search/general", params={"name": "Dupont"})
        assert response.status_code == 501
        assert response.json()["error"] == "Not Implemented"

    def test_stats(self, client):
        client.post("/api/v1/doctors", json=martin_data)
        client.post("/api/v1/patients", json=dupont_data)

        response = client.get("/api/v1/people/stats")
        assert response.json() == {"doctor_count": 1, "patient_count": 1, "total_people_count": 2}

class TestSelection:

    def test_no_selection_by_default(self, client):
        assert client.get("/api/v1/selection/doctor").json() is None
        assert client.get("/api/v1/selection/patient").json() is None

    def test_select_doctor(self, client, registry):
        """Test selecting a doctor and reading it back."""
        doctor_id = client.post("/api/v1/doctors", json=martin_data).json()["id"]

        response = client.put("/api/v1/selection/doctor", json={"id": doctor_id})
        assert response.status_code == 200
        assert client.get("/api/v1/selection/doctor").json()["id"] == doctor_id
        assert str(registry.current_doctor.id) == doctor_id

    def test_select_unknown_patient(self, client):
        response = client.put("/api/v1/selection/patient", json={"id": str(uuid4())})
        assert response.status_code == 404

    def test_selection_kept_after_removal(self, client):
        """Test that removing a record leaves the selection in place."""
        patient_id = client.post("/api/v1/patients", json=dupont_data).json()["id"]
        client.put("/api/v1/selection/patient", json={"id": patient_id})
        client.delete(f"/api/v1/patients/{patient_id}")

        assert client.get("/api/v1/selection/patient").json()["id"] == patient_id

        client.delete("/api/v1/selection/patient")
        assert client.get("/api/v1/selection/patient").json() is None

class TestMenus:

    def _action(self, menu, name):
        return next(a for a in menu["actions"] if a["name"] == name)

    def test_doctors_menu_follows_doctor_count(self, client):
        """Test that showing doctors is disabled while there are none."""
        menu = client.get("/api/v1/menus/doctors").json()
        assert self._action(menu, "show_doctors")["enabled"] is False
        assert self._action(menu, "add_doctor")["enabled"] is True

        client.post("/api/v1/doctors", json=martin_data)

        menu = client.get("/api/v1/menus/doctors").json()
        assert self._action(menu, "show_doctors")["enabled"] is True
        assert menu["counts"]["doctor_count"] == 1

    def test_patients_menu(self, client):
        menu = client.get("/api/v1/menus/patients").json()
        assert self._action(menu, "show_patients")["enabled"] is False
        assert self._action(menu, "back")["target"] == "/api/v1/menus/main"

    def test_main_menu_counts(self, client):
        client.post("/api/v1/patients", json=dupont_data)

        menu = client.get("/api/v1/menus/main").json()
        assert menu["counts"]["total_people_count"] == 1
        assert self._action(menu, "search_people")["enabled"] is True

class TestApplication:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_info(self, client):
        response = client.get("/api/v1/info")
        assert response.status_code == 200
        assert response.json()["hospital"] == "Test Hospital"
        assert response.json()["appointment_price"] == 25.0

    def test_process_time_header(self, client):
        response = client.get("/")
        assert "X-Process-Time" in response.headers

    def test_state_shared_across_requests(self, client):
        """Test that every request sees the same registry."""
        client.post("/api/v1/doctors", json=martin_data)
        client.post("/api/v1/patients", json=dupont_data)
        client.delete(f"/api/v1/patients/{uuid4()}")

        stats = client.get("/api/v1/people/stats").json()
        assert stats["total_people_count"] == 2

    def test_startup_creates_shared_registry(self, caplog):
        """Test the registry built at startup is the one every request sees."""
        app.dependency_overrides.clear()

        with caplog.at_level(logging.INFO):
            with TestClient(app, base_url="http://testserver") as test_client:
                registry = app.state.registry
                assert isinstance(registry, HospitalRegistry)
                assert registry.name == settings.HOSPITAL_NAME
                assert registry.appointment_price == settings.APPOINTMENT_PRICE

                response = test_client.post("/api/v1/doctors", json=martin_data)
                assert response.status_code == 201

                stats = test_client.get("/api/v1/people/stats").json()
                assert stats["total_people_count"] == 1
                assert registry.doctor_count == 1

        messages = [record.getMessage() for record in caplog.records]
        assert any("Registry doctor_added: Martin" in message for message in messages)
        assert any("Total: 1" in message for message in messages)

    def test_record_not_found_is_http_404(self):
        error = RecordNotFoundError("doctor", "abc")
        assert isinstance(error, HTTPException)
        assert error.status_code == 404
        assert error.detail == "Doctor abc not found"

if __name__ == "__main__":
    pytest.main([__file__])
