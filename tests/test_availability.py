from observatory.models import RoleEnum

OPEN_DATES = ["2024-06-01", "2024-06-02", "2024-06-03"]


def open_observatory(client, headers, requirements=None):
    assert client.post("/api/obs-availability", json={"openDates": OPEN_DATES}, headers=headers).status_code == 200
    settings = {"bookingsActive": True, "requirements": requirements or []}
    assert client.post("/api/obs-availability-settings", json=settings, headers=headers).status_code == 200


def test_obs_defaults_when_unset(client):
    assert client.get("/api/obs-availability").json() == {"openDates": []}
    assert client.get("/api/obs-availability-settings").json() == {"bookingsActive": True, "requirements": []}


def test_admin_sets_obs_calendar_and_settings(client, make_user, login):
    make_user("admin@example.com", RoleEnum.ADMIN)
    requirements = [{"groupMin": 1, "groupMax": 20, "hosts": 1}]

    open_observatory(client, login("admin@example.com"), requirements)

    assert client.get("/api/obs-availability").json() == {"openDates": OPEN_DATES}
    assert client.get("/api/obs-availability-settings").json() == {"bookingsActive": True, "requirements": requirements}


def test_obs_updates_require_admin(client, make_user, login):
    make_user("member@example.com")
    headers = login("member@example.com")

    assert client.post("/api/obs-availability", json={"openDates": OPEN_DATES}, headers=headers).status_code == 403
    assert client.post("/api/obs-availability-settings", json={"bookingsActive": False}, headers=headers).status_code == 403


def test_hosting_availability_per_user(client, make_user, login):
    make_user("one@example.com")
    make_user("two@example.com")
    one = login("one@example.com")
    two = login("two@example.com")

    assert client.get("/api/hosting-availability", headers=one).json() == {}

    client.post("/api/hosting-availability", json={"dates": ["2024-06-01"]}, headers=one)
    client.post("/api/hosting-availability", json={"dates": ["2024-06-02", "2024-06-03"]}, headers=one)
    client.post("/api/hosting-availability", json={"dates": ["2024-06-09"]}, headers=two)

    mine = client.get("/api/hosting-availability", headers=one).json()
    assert mine["dates"] == ["2024-06-02", "2024-06-03"]
    assert mine["type"] == "hosting"
    assert mine["role"] == "member"
    assert client.get("/api/hosting-availability", headers=two).json()["dates"] == ["2024-06-09"]


def test_available_dates(client, make_user, login):
    make_user("admin@example.com", RoleEnum.ADMIN)
    make_user("guest@example.com", RoleEnum.GUEST)
    open_observatory(client, login("admin@example.com"), [{"groupMin": 1, "groupMax": 20}])
    client.post(
        "/api/bookings",
        json={"groupName": "Club", "groupType": "School", "groupSize": 5, "date": "2024-06-01"},
        headers=login("guest@example.com"),
    )

    def available(**params):
        return client.get("/api/bookings/available-dates", params=params).json()["dates"]

    assert available(groupSize=5, groupType="School") == ["2024-06-02", "2024-06-03"]
    assert available(groupSize=50, groupType="School") == []
    assert available(groupSize=50, groupType="Member") == ["2024-06-02", "2024-06-03"]
    assert available(groupSize=5) == []
    assert available(groupSize="many", groupType="School") == []
    assert available(groupSize="12abc", groupType="School") == ["2024-06-02", "2024-06-03"]
    assert available(groupSize="12.5", groupType="School") == ["2024-06-02", "2024-06-03"]
    assert available(groupSize="25.5", groupType="School") == []


def test_cancelled_booking_frees_date(client, make_user, login):
    make_user("admin@example.com", RoleEnum.ADMIN)
    admin = login("admin@example.com")
    open_observatory(client, admin, [{"groupMin": 1, "groupMax": 20}])
    booking = client.post(
        "/api/bookings",
        json={"groupName": "Club", "groupType": "School", "groupSize": 5, "date": "2024-06-02"},
        headers=admin,
    ).json()["booking"]

    client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "cancelled"}, headers=admin)

    dates = client.get("/api/bookings/available-dates", params={"groupSize": 5, "groupType": "School"}).json()["dates"]
    assert dates == OPEN_DATES
