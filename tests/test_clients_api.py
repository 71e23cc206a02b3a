def test_create_client_normalizes_contact_fields(api):
    response = api.post(
        "/clients",
        json={"name": "  Morgan Lee ", "email": "Morgan.Lee@Example.com", "phone": "(603) 555-0188"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Morgan Lee"
    assert body["email"] == "morgan.lee@example.com"
    assert body["phone"] == "+16035550188"
    assert body["addresses"] == []
    assert body["public_id"]


def test_create_client_rejects_bad_phone(api):
    response = api.post("/clients", json={"name": "Morgan Lee", "phone": "555-01"})

    assert response.status_code == 422


def test_create_client_requires_name(api):
    assert api.post("/clients", json={"name": " "}).status_code == 422


def test_add_address_and_fetch_client(api, client_record):
    response = api.post(
        f"/clients/{client_record.id}/addresses",
        json={"line1": "88 Birch Rd", "city": "Concord", "state": "NH", "zip": "03301"},
    )

    assert response.status_code == 201
    fetched = api.get(f"/clients/{client_record.id}").json()
    assert [a["line1"] for a in fetched["addresses"]] == ["88 Birch Rd"]


def test_add_address_requires_street(api, client_record):
    response = api.post(f"/clients/{client_record.id}/addresses", json={"line1": ""})

    assert response.status_code == 422


def test_add_address_unknown_client(api):
    response = api.post("/clients/9999/addresses", json={"line1": "1 Main St"})

    assert response.status_code == 404


def test_search_clients(api, client_record):
    api.post("/clients", json={"name": "Sam Ortiz", "email": "sam@ortiz.dev"})

    results = api.get("/clients", params={"q": "ortiz"}).json()

    assert [c["name"] for c in results] == ["Sam Ortiz"]
    assert len(api.get("/clients").json()) == 2


def test_get_unknown_client(api):
    response = api.get("/clients/9999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Client not found"


def test_client_response_reads_orm_rows(client_record, address_record, db):
    from app.domain.clients.schemas import ClientResponse

    db.refresh(client_record)
    response = ClientResponse.model_validate(client_record)

    assert ClientResponse.model_config["from_attributes"] is True
    assert response.name == "Dana Whitfield"
    assert [a.line1 for a in response.addresses] == ["12 Elm St"]
