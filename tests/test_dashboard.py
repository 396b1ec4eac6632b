"""Tests for the dashboard page."""

from datetime import date

from carwash.routers import dashboard as dashboard_router
from conftest import BrokenSession, create_booking, create_user, create_vehicle, service_id_by_name


class TestDashboardAccess:

    def test_redirects_to_login(self, client):
        response = client.get("/dashboard", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"].endswith("/login")


class TestDashboardEmpty:

    def test_empty_states(self, auth_client):
        response = auth_client.get("/dashboard")
        assert response.status_code == 200
        assert "No vehicles registered yet." in response.text
        assert "No bookings found." in response.text

    def test_quick_actions(self, auth_client):
        response = auth_client.get("/dashboard")
        assert 'href="http://testserver/booking"' in response.text
        assert 'href="http://testserver/vehicles/new"' in response.text


class TestDashboardData:

    def test_lists_own_vehicles_only(self, auth_client, user_id):
        create_vehicle(user_id, plate_number="B 1 AB", vehicle_type="SUV")
        other_id = create_user(email="sari@example.com")
        create_vehicle(other_id, plate_number="D 9 ZZ")

        response = auth_client.get("/dashboard")

        assert "B 1 AB" in response.text
        assert "SUV" in response.text
        assert "D 9 ZZ" not in response.text
        assert "No vehicles registered yet." not in response.text

    def test_booking_details(self, auth_client, user_id):
        vehicle_id = create_vehicle(user_id, plate_number="B 1 AB")
        create_booking(user_id, vehicle_id, service_id_by_name("Deluxe Package"),
                       date(2030, 3, 7), booking_time="15:00")

        response = auth_client.get("/dashboard")

        assert "Deluxe Package" in response.text
        assert "Toyota Avanza - B 1 AB" in response.text
        assert "3/7/2030 at 15:00" in response.text
        assert "Pending" in response.text
        assert "bg-yellow-100 text-yellow-800" in response.text

    def test_bookings_newest_date_first(self, auth_client, user_id):
        vehicle_id = create_vehicle(user_id)
        create_booking(user_id, vehicle_id, service_id_by_name("Basic Wash"), date(2030, 1, 1))
        create_booking(user_id, vehicle_id, service_id_by_name("Premium Wash"), date(2030, 6, 1))

        text = auth_client.get("/dashboard").text

        assert text.index("Premium Wash") < text.index("Basic Wash")

    def test_status_badges(self, auth_client, user_id):
        vehicle_id = create_vehicle(user_id)
        service_id = service_id_by_name("Basic Wash")
        create_booking(user_id, vehicle_id, service_id, date(2030, 1, 1), status="completed")
        create_booking(user_id, vehicle_id, service_id, date(2030, 1, 2), status="cancelled")

        text = auth_client.get("/dashboard").text

        assert "Completed" in text
        assert "bg-green-100 text-green-800" in text
        assert "Cancelled" in text
        assert "bg-gray-100 text-gray-800" in text

    def test_store_failure_renders_empty(self, auth_client, user_id, monkeypatch):
        create_vehicle(user_id, plate_number="B 1 AB")
        monkeypatch.setattr(dashboard_router, "SessionLocal", BrokenSession)

        response = auth_client.get("/dashboard")

        assert response.status_code == 200
        assert "No vehicles registered yet." in response.text
        assert "No bookings found." in response.text
