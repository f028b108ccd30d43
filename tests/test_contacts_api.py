import pytest


CONTACT = {"name": "A", "email": "a@x.com", "message": "hi"}


def create(client, payload=CONTACT):
    response = client.post("/api/contacts", json=payload)
    assert response.status_code == 201
    return response.json()


def test_crud_scenario(client):
    created = client.post("/api/contacts", json=CONTACT)
    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 1
    assert {key: body[key] for key in CONTACT} == CONTACT
    assert body["created_at"]

    fetched = client.get("/api/contacts/1")
    assert fetched.status_code == 200
    assert fetched.json() == body

    updated = client.put("/api/contacts/1", json={**CONTACT, "name": "B"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "B"
    assert updated.json()["created_at"] == body["created_at"]

    deleted = client.delete("/api/contacts/1")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}

    missing = client.get("/api/contacts/1")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Contact not found"}


def test_list_contacts(client):
    assert client.get("/api/contacts").json() == []

    first = create(client)
    second = create(client, {**CONTACT, "name": "Z"})

    response = client.get("/api/contacts")

    assert response.status_code == 200
    assert response.json() == [first, second]


def test_get_with_non_integer_id_is_bad_request(client):
    response = client.get("/api/contacts/abc")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid id"}


def test_get_unknown_id_is_not_found(client):
    response = client.get("/api/contacts/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Contact not found"}


def test_id_out_of_storage_range_is_bad_request(client):
    response = client.get(f"/api/contacts/{2 ** 63}")

    assert response.status_code == 400


@pytest.mark.parametrize("field", ["name", "email", "message"])
def test_create_rejects_empty_and_absent_fields_identically(client, field):
    absent = {key: value for key, value in CONTACT.items() if key != field}
    empty = {**CONTACT, field: ""}

    absent_response = client.post("/api/contacts", json=absent)
    empty_response = client.post("/api/contacts", json=empty)

    assert absent_response.status_code == empty_response.status_code == 400
    assert absent_response.json() == empty_response.json() == {"error": "Missing required fields"}
    assert client.get("/api/contacts").json() == []


@pytest.mark.parametrize("field", ["name", "email", "message"])
def test_update_rejects_empty_and_absent_fields_identically(client, field):
    created = create(client)
    absent = {key: value for key, value in CONTACT.items() if key != field}
    empty = {**CONTACT, field: ""}

    absent_response = client.put(f"/api/contacts/{created['id']}", json=absent)
    empty_response = client.put(f"/api/contacts/{created['id']}", json=empty)

    assert absent_response.status_code == empty_response.status_code == 400
    assert absent_response.json() == empty_response.json() == {"error": "Missing required fields"}


def test_update_checks_id_before_body(client):
    response = client.put("/api/contacts/abc", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid id"}


def test_update_unknown_id_is_not_found(client):
    response = client.put("/api/contacts/42", json=CONTACT)

    assert response.status_code == 404


def test_update_is_idempotent(client):
    created = create(client)
    payload = {"name": "B", "email": "b@x.com", "message": "again"}

    once = client.put(f"/api/contacts/{created['id']}", json=payload).json()
    twice = client.put(f"/api/contacts/{created['id']}", json=payload).json()

    assert once == twice


def test_delete_bad_and_unknown_ids(client):
    assert client.delete("/api/contacts/x1").status_code == 400
    assert client.delete("/api/contacts/7").status_code == 404


def test_create_accepts_form_encoded_body(client):
    response = client.post("/api/contacts", data=CONTACT)

    assert response.status_code == 201
    assert response.json()["email"] == "a@x.com"


def test_create_with_malformed_json_is_bad_request(client):
    response = client.post(
        "/api/contacts",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_create_with_json_array_is_missing_fields(client):
    response = client.post("/api/contacts", json=[CONTACT])

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_storage_fault_is_internal_error_without_details(client, drop_contacts_table):
    drop_contacts_table()

    response = client.get("/api/contacts")

    assert response.status_code == 500
    assert response.json() == {"error": "Database error"}


def test_validation_runs_before_storage_access(client, drop_contacts_table):
    drop_contacts_table()

    assert client.get("/api/contacts/abc").status_code == 400
    assert client.post("/api/contacts", json={}).status_code == 400


def test_unknown_api_route_is_json_not_found(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


@pytest.mark.parametrize("raw_id", ["0_1", "١", "1e2", "1.0", "0x1"])
def test_non_ascii_integer_ids_are_bad_request(client, raw_id):
    create(client)

    assert client.get(f"/api/contacts/{raw_id}").status_code == 400
    assert client.put(f"/api/contacts/{raw_id}", json=CONTACT).status_code == 400
    response = client.delete(f"/api/contacts/{raw_id}")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid id"}
    assert len(client.get("/api/contacts").json()) == 1


def test_signed_ids_are_parsed(client):
    created = create(client)

    assert client.get(f"/api/contacts/+{created['id']}").json() == created
    assert client.get("/api/contacts/-1").status_code == 404


@pytest.mark.parametrize("method, path, payload", [
    ("GET", "/api/contacts/1", None),
    ("PUT", "/api/contacts/1", CONTACT),
    ("DELETE", "/api/contacts/1", None),
    ("POST", "/api/contacts", CONTACT),
])
def test_storage_fault_on_single_contact_routes(client, drop_contacts_table, method, path, payload):
    create(client)
    drop_contacts_table()

    response = client.request(method, path, json=payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Database error"}
