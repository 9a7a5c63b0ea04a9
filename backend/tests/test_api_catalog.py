from inkmatch.core.config import settings

from helpers import auth_headers, seed_artist, seed_tattoo

API = settings.API_V1_STR

UPLOAD = {
    "imageUrl": "https://img.example.com/dragon.jpg",
    "description": "Dragon back piece",
    "price": 900,
    "size": "Large",
    "tags": ["dragon", "japanese"],
    "bodyPart": "Back",
}


def test_artist_endpoints_require_token(client):
    assert client.get(f"{API}/artists/me").status_code == 401
    assert client.post(f"{API}/tattoos", json=UPLOAD).status_code == 401
    bad = {"Authorization": "Bearer not-a-jwt"}
    assert client.get(f"{API}/tattoos/mine", headers=bad).status_code == 401


def test_profile_upsert_and_lookup(client):
    headers = auth_headers("user-1")
    assert client.get(f"{API}/artists/me", headers=headers).status_code == 404

    res = client.put(f"{API}/artists/me", json={"name": "Kai", "location": "Seoul"}, headers=headers)
    assert res.status_code == 200
    artist_id = res.json()["id"]

    res = client.put(
        f"{API}/artists/me",
        json={"name": "Kai", "location": "Busan", "instagram": "@kai"},
        headers=headers,
    )
    assert res.json()["id"] == artist_id
    assert res.json()["location"] == "Busan"

    assert [a["id"] for a in client.get(f"{API}/artists").json()] == [artist_id]
    assert client.get(f"{API}/artists/{artist_id}").json()["instagram"] == "@kai"
    assert client.get(f"{API}/artists/missing").status_code == 404


def test_upload_and_browse(client):
    headers = auth_headers("user-1")
    artist_id = client.put(
        f"{API}/artists/me", json={"name": "Kai", "location": "Seoul"}, headers=headers
    ).json()["id"]

    res = client.post(f"{API}/tattoos", json=UPLOAD, headers=headers)
    assert res.status_code == 201
    tattoo = res.json()
    assert tattoo["artistId"] == artist_id

    assert [t["id"] for t in client.get(f"{API}/tattoos").json()] == [tattoo["id"]]
    assert client.get(f"{API}/tattoos/{tattoo['id']}").json()["bodyPart"] == "Back"
    assert len(client.get(f"{API}/artists/{artist_id}/tattoos").json()) == 1
    assert len(client.get(f"{API}/tattoos/mine", headers=headers).json()) == 1


def test_upload_with_zero_price_is_rejected(client, store):
    headers = auth_headers("user-1")
    client.put(f"{API}/artists/me", json={"name": "Kai", "location": "Seoul"}, headers=headers)

    res = client.post(f"{API}/tattoos", json={**UPLOAD, "price": 0}, headers=headers)
    assert res.status_code == 422
    assert "price" in res.json()["detail"]["field_errors"]
    assert client.get(f"{API}/tattoos").json() == []


def test_upload_without_profile_is_forbidden(client):
    res = client.post(f"{API}/tattoos", json=UPLOAD, headers=auth_headers("nobody"))
    assert res.status_code == 403


def test_update_and_delete_respect_ownership(client, store):
    seed_artist(store, "X", user_id="user-x")
    seed_artist(store, "Y", user_id="user-y")
    seed_tattoo(store, "ty", "Y")

    res = client.patch(f"{API}/tattoos/ty", json={"price": 1}, headers=auth_headers("user-x"))
    assert res.status_code == 403
    assert client.delete(f"{API}/tattoos/ty", headers=auth_headers("user-x")).status_code == 403
    assert client.patch(f"{API}/tattoos/nope", json={"price": 1}, headers=auth_headers("user-y")).status_code == 404

    res = client.patch(f"{API}/tattoos/ty", json={"price": 150}, headers=auth_headers("user-y"))
    assert res.status_code == 200
    assert res.json()["price"] == 150

    assert client.delete(f"{API}/tattoos/ty", headers=auth_headers("user-y")).status_code == 204
    assert client.get(f"{API}/tattoos/ty").status_code == 404


def test_healthz(client):
    assert client.get("/healthz").json()["status"] == "ok"
