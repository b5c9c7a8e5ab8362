from observatory.models import RoleEnum


def test_admin_lists_users(client, make_user, login):
    make_user("admin@example.com", RoleEnum.ADMIN)
    make_user("member@example.com")
    make_user("guest@example.com", RoleEnum.GUEST)
    headers = login("admin@example.com")

    everyone = client.get("/api/users", headers=headers)
    guests = client.get("/api/users", params={"role": "guest"}, headers=headers)

    assert everyone.status_code == 200
    assert len(everyone.json()) == 3
    assert all("password" not in user for user in everyone.json())
    assert [user["email"] for user in guests.json()] == ["guest@example.com"]


def test_listing_requires_admin(client, make_user, login):
    make_user("member@example.com")

    assert client.get("/api/users", headers=login("member@example.com")).status_code == 403


def test_read_self_but_not_others(client, make_user, login):
    me = make_user("me@example.com")
    other = make_user("other@example.com")
    headers = login("me@example.com")

    assert client.get(f"/api/users/{me['id']}", headers=headers).json()["email"] == "me@example.com"
    assert client.get(f"/api/users/{other['id']}", headers=headers).status_code == 403


def test_update_self(client, make_user, login):
    me = make_user("me@example.com")
    headers = login("me@example.com")

    response = client.patch(f"/api/users/{me['id']}", json={"name": "Renamed", "password": "NewPassw0rd!"}, headers=headers)

    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"
    assert "password" not in response.json()
    assert login("me@example.com", "NewPassw0rd!")


def test_update_email_conflict(client, make_user, login):
    me = make_user("me@example.com")
    make_user("taken@example.com")

    response = client.patch(
        f"/api/users/{me['id']}", json={"email": "taken@example.com"}, headers=login("me@example.com")
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Failed to update user: Email already exists"


def test_role_change_requires_admin(client, make_user, login):
    me = make_user("me@example.com", RoleEnum.GUEST)
    make_user("admin@example.com", RoleEnum.ADMIN)

    denied = client.patch(f"/api/users/{me['id']}", json={"role": "admin"}, headers=login("me@example.com"))
    granted = client.patch(f"/api/users/{me['id']}", json={"role": "member"}, headers=login("admin@example.com"))

    assert denied.status_code == 403
    assert granted.status_code == 200
    assert granted.json()["role"] == "member"


def test_admin_changes_status_and_deletes(client, make_user, login):
    make_user("admin@example.com", RoleEnum.ADMIN)
    member = make_user("member@example.com")
    headers = login("admin@example.com")

    suspended = client.patch(f"/api/users/{member['id']}/status", json={"status": "suspended"}, headers=headers)
    assert suspended.status_code == 200
    assert suspended.json()["status"] == "suspended"

    assert client.patch(f"/api/users/{member['id']}/status", json={"status": "banned"}, headers=headers).status_code == 422
    assert client.patch("/api/users/missing/status", json={"status": "active"}, headers=headers).status_code == 404

    assert client.delete(f"/api/users/{member['id']}", headers=headers).json()["email"] == "member@example.com"
    assert client.delete(f"/api/users/{member['id']}", headers=headers).status_code == 404
