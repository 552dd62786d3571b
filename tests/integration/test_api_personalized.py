import random

import pytest

from content_service.db import models
from content_service.utils.passwords import verify_password
from content_service.utils.profiles import PROFILE_PRESETS

pytestmark = pytest.mark.integration


def _signup(client, email="api@x.com", password="correct horse"):
    r = client.post("/users", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_signup_hashes_password_and_seeds_catalogs(make_client, catalog, SessionTest, count_rows):
    client = make_client(catalog_variant="personalized")

    user_id = _signup(client)

    with SessionTest() as session:
        user = session.get(models.User, user_id)
        assert user.email == "api@x.com"
        assert user.pass_hash != b"correct horse"
        assert verify_password("correct horse", user.pass_hash)
    assert count_rows(models.UserAuthor, user_id=user_id) == 3


def test_signup_conflict_maps_to_409(make_client):
    client = make_client(catalog_variant="personalized")
    _signup(client, email="twice@x.com")

    r = client.post("/users", json={"email": "twice@x.com", "password": "other"})

    assert r.status_code == 409
    assert r.headers["content-type"].startswith("text/plain")
    assert "api.create_user" in r.text
    assert "user already exists" in r.text


def test_signup_conflict_maps_to_500_in_legacy_mode(make_client):
    client = make_client(catalog_variant="personalized", error_status_mode="legacy")
    _signup(client, email="twice@x.com")

    r = client.post("/users", json={"email": "twice@x.com", "password": "other"})

    assert r.status_code == 500
    assert "user already exists" in r.text


def test_signup_rejects_invalid_payload(make_client):
    client = make_client()
    r = client.post("/users", json={"email": "x@x.com"})
    assert r.status_code == 422


def test_scoped_lists_for_caller(make_client, catalog, as_user):
    client = make_client(catalog_variant="personalized")
    user_id = _signup(client)

    authors = client.get("/authors", headers=as_user(user_id))
    articles = client.get("/articles", headers=as_user(user_id))
    poets = client.get("/poets", headers=as_user(user_id))

    assert authors.status_code == 200
    assert authors.headers["content-type"] == "application/json"
    assert len(authors.json()) == 3
    assert set(authors.json()[0]) == {"id", "name", "image"}
    assert {a["description"] for a in articles.json()} == {"Notes on prose", "The short story"}
    assert len(poets.json()) == 2


def test_scoped_lists_isolated_between_callers(make_client, catalog, as_user, SessionTest):
    client = make_client(catalog_variant="personalized")
    alice = _signup(client, email="alice@x.com")
    bob = _signup(client, email="bob@x.com")

    with SessionTest() as session:
        extra = models.Poet(name="Marina Tsvetaeva", image="https://img.example/tsvetaeva.png")
        session.add(extra)
        session.flush()
        session.add(models.UserPoet(user_id=bob, poet_id=extra.id))
        session.commit()

    alice_poets = {p["name"] for p in client.get("/poets", headers=as_user(alice)).json()}
    bob_poets = {p["name"] for p in client.get("/poets", headers=as_user(bob)).json()}

    assert "Marina Tsvetaeva" in bob_poets
    assert "Marina Tsvetaeva" not in alice_poets


def test_get_user_profile(make_client, as_user):
    client = make_client(catalog_variant="personalized", profile_seed=3)
    user_id = _signup(client)

    r = client.get("/user", headers=as_user(user_id))

    expected = random.Random(3).choice(PROFILE_PRESETS)
    assert r.status_code == 200
    assert r.json() == {"name": expected.name, "image": expected.image}


def test_get_unknown_user_is_404(make_client, as_user):
    client = make_client()
    r = client.get("/user", headers=as_user(31337))
    assert r.status_code == 404
    assert r.text == "api.get_user: users.get_user_profile: user not found"


def test_get_unknown_user_is_500_in_legacy_mode(make_client, as_user):
    client = make_client(error_status_mode="legacy")
    r = client.get("/user", headers=as_user(31337))
    assert r.status_code == 500


def test_delete_user_then_lists_are_empty(make_client, catalog, as_user, count_rows):
    client = make_client(catalog_variant="personalized")
    user_id = _signup(client)

    r = client.delete("/user", headers=as_user(user_id))
    assert r.status_code == 204
    assert r.content == b""

    assert client.get("/authors", headers=as_user(user_id)).json() == []
    assert client.get("/user", headers=as_user(user_id)).status_code == 404
    assert count_rows(models.UserAuthor, user_id=user_id) == 0
    # Repeat delete is a no-op
    assert client.delete("/user", headers=as_user(user_id)).status_code == 204


def test_missing_identity_is_a_server_error(make_client):
    client = make_client()
    for method, path in (("get", "/user"), ("delete", "/user"), ("get", "/authors")):
        r = getattr(client, method)(path)
        assert r.status_code == 500
        assert r.text == "UID not found in context"


def test_malformed_identity_header_is_ignored(make_client):
    client = make_client()
    r = client.get("/authors", headers={"X-Auth-Request-User-Id": "not-a-number"})
    assert r.status_code == 500


def test_personalized_app_has_no_shared_routes(make_client, as_user):
    client = make_client(catalog_variant="personalized")
    assert client.get("/courses", headers=as_user(1)).status_code == 404
    assert client.get("/feeds", headers=as_user(1)).status_code == 404


def test_health(make_client):
    r = make_client(catalog_variant="personalized").get("/health")
    assert r.json() == {"status": "ok", "variant": "personalized"}
