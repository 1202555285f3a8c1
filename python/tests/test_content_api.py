import pytest
from fastapi.testclient import TestClient

from aiml_gateway.dependencies import get_content_store
from aiml_gateway.main import app


@pytest.fixture
def client(content):
    app.dependency_overrides[get_content_store] = lambda: content
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestFacultyRoutes:
    def test_list_and_filters(self, client):
        body = client.get("/api/faculty").json()
        assert body["success"] is True
        assert body["count"] == 7

        body = client.get("/api/faculty", params={"specialization": "computer vision"}).json()
        assert body["count"] == 3

    def test_lookup_and_404(self, client):
        assert client.get("/api/faculty/fac002").json()["data"]["email"] == "sandeep.mel@bmsce.ac.in"
        response = client.get("/api/faculty/nobody")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Faculty member not found"}

    def test_designation_and_stats(self, client):
        assert client.get("/api/faculty/designation/hod").json()["count"] == 1
        assert client.get("/api/faculty/stats/overview").json()["data"]["totalFaculty"] == 7


class TestCourseRoutes:
    def test_filters(self, client):
        assert client.get("/api/courses", params={"credits": 3}).json()["count"] == 2
        assert client.get("/api/courses", params={"semester": "5th"}).json()["count"] == 4
        assert client.get("/api/courses/instructor/pallavi").json()["count"] == 1

    def test_bad_credits_is_400(self, client):
        response = client.get("/api/courses", params={"credits": "four"})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_prerequisites_and_404(self, client):
        data = client.get("/api/courses/course004/prerequisites").json()["data"]
        assert data["prerequisites"] == ["Machine Learning"]
        assert client.get("/api/courses/nope").status_code == 404
        assert client.get("/api/courses/nope/prerequisites").status_code == 404


class TestCalendarRoutes:
    def test_calendar_by_year(self, client):
        assert client.get("/api/calendar").json()["data"]["academicYear"] == "2024-2025"
        response = client.get("/api/calendar", params={"year": "1999-2000"})
        assert response.status_code == 404
        assert response.json()["error"] == "Academic calendar not found for the specified year"

    def test_events_use_fixture_field_names(self, client):
        events = client.get("/api/calendar/events/holiday").json()["data"]["events"]
        assert events[0] == {"date": "2024-09-07", "event": "Ganesh Chaturthi", "type": "holiday"}

    def test_exams_and_semesters(self, client):
        assert client.get("/api/calendar/exams", params={"semester": "4th"}).json()["count"] == 1
        assert client.get("/api/calendar/semesters").json()["count"] == 2
        assert client.get("/api/calendar/upcoming", params={"limit": 2}).json()["count"] <= 2


class TestInfrastructureRoutes:
    def test_department_and_labs(self, client):
        assert client.get("/api/infrastructure").json()["data"]["department"].startswith("Artificial")
        assert client.get("/api/infrastructure", params={"department": "civil"}).status_code == 404
        assert client.get("/api/infrastructure/labs", params={"capacity": 50}).json()["count"] == 2

    def test_single_lab(self, client):
        assert client.get("/api/infrastructure/labs/vision").json()["data"]["capacity"] == 40
        response = client.get("/api/infrastructure/labs/quantum")
        assert response.status_code == 404
        assert response.json()["error"] == "Lab not found"

    def test_library_computer_labs_research_stats(self, client):
        assert client.get("/api/infrastructure/library").json()["data"]["books"] == 4200
        assert client.get("/api/infrastructure/computer-labs").json()["data"]["computers"] == 130
        assert client.get("/api/infrastructure/research").json()["count"] == 2
        assert client.get("/api/infrastructure/stats").json()["data"]["totalEquipment"] == 155


def test_empty_store_returns_404(empty_content):
    app.dependency_overrides[get_content_store] = lambda: empty_content
    try:
        client = TestClient(app)
        assert client.get("/api/calendar").status_code == 404
        assert client.get("/api/infrastructure/stats").json() == {
            "success": False, "error": "Infrastructure details not found"
        }
        assert client.get("/api/faculty").json() == {"success": True, "count": 0, "data": []}
    finally:
        app.dependency_overrides.clear()


def test_health_and_metrics():
    client = TestClient(app)
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "OK"
    assert "timestamp" in health.json()

    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "http_requests_total" in metrics.text


def test_unknown_route_uses_error_envelope():
    response = TestClient(app).get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json()["success"] is False
