from datetime import date

import pytest


def test_validar_pessoa_adult_with_known_email(client):
    r = client.post(
        "/validar-pessoa",
        json={"name": "Carla", "birthDate": "01/01/1990", "email": "CARLA.MENDES@example.com"},
    )
    assert r.status_code == 200
    assert r.json() == {
        "message": "Pessoa validada com sucesso",
        "name": "Carla",
        "age": date.today().year - 1990,
        "isAdult": True,
        "emailFound": True,
    }


def test_validarpessoa_alias(client):
    r = client.post(
        "/validarpessoa",
        json={"name": "Zé", "birthDate": f"{date.today().year - 5}-01-01", "email": "ze@example.org"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["age"] == 5
    assert body["isAdult"] is False
    assert body["emailFound"] is False


@pytest.mark.parametrize(
    "payload",
    [
        {"birthDate": "2000-01-01", "email": "a@b.c"},
        {"name": "   ", "birthDate": "2000-01-01", "email": "a@b.c"},
        {"name": "Ana", "birthDate": "", "email": "a@b.c"},
        {"name": "Ana", "birthDate": "2000-01-01", "email": ""},
    ],
)
def test_validar_pessoa_missing_fields(client, payload):
    r = client.post("/validar-pessoa", json=payload)
    assert r.status_code == 400
    assert r.json()["code"] == "VALIDATION_ERROR"


def test_validar_pessoa_bad_date(client):
    r = client.post(
        "/validar-pessoa",
        json={"name": "Ana", "birthDate": "not-a-date", "email": "a@b.c"},
    )
    assert r.status_code == 400
    assert "not-a-date" in r.json()["detail"]


def test_validar_pessoa_without_body(client):
    r = client.post("/validar-pessoa")
    assert r.status_code == 400
