import asyncio

import pytest

from inkmatch.crud import tattoo as crud_tattoo
from inkmatch.store.base import TATTOOS_COLLECTION
from inkmatch.utils.errors import NotFound, PermissionDenied, ValidationFailed

from helpers import seed_artist, seed_tattoo

VALID = {
    "imageUrl": "https://img.example.com/koi.jpg",
    "description": "Koi sleeve",
    "price": 450,
    "size": "Large",
}


def test_upload_creates_tattoo_for_callers_artist(store):
    seed_artist(store, "A", user_id="user-a")

    created = asyncio.run(
        crud_tattoo.upload_tattoo(store, "user-a", {**VALID, "tags": " koi, , japanese ", "style": ""})
    )

    assert created.artist_id == "A"
    assert created.tags == ["koi", "japanese"]
    assert created.color is True
    doc = asyncio.run(store.get(TATTOOS_COLLECTION, created.id))
    assert doc["artistId"] == "A"
    assert doc["createdAt"] == doc["updatedAt"]
    # Absent optional fields are not written.
    assert "style" not in doc
    assert "bodyPart" not in doc


@pytest.mark.parametrize(
    "override, field",
    [
        ({"price": 0}, "price"),
        ({"price": -10}, "price"),
        ({"description": "   "}, "description"),
        ({"size": ""}, "size"),
    ],
)
def test_invalid_upload_writes_nothing(store, override, field):
    seed_artist(store, "A", user_id="user-a")

    with pytest.raises(ValidationFailed) as exc:
        asyncio.run(crud_tattoo.upload_tattoo(store, "user-a", {**VALID, **override}))

    assert field in exc.value.field_errors
    assert asyncio.run(store.list(TATTOOS_COLLECTION)) == []


def test_missing_price_is_rejected(store):
    seed_artist(store, "A", user_id="user-a")
    payload = {k: v for k, v in VALID.items() if k != "price"}
    with pytest.raises(ValidationFailed):
        asyncio.run(crud_tattoo.upload_tattoo(store, "user-a", payload))


def test_upload_requires_artist_profile(store):
    with pytest.raises(PermissionDenied):
        asyncio.run(crud_tattoo.upload_tattoo(store, "no-profile", VALID))
    assert asyncio.run(store.list(TATTOOS_COLLECTION)) == []


def test_update_writes_only_provided_fields(store):
    seed_artist(store, "A", user_id="user-a")
    seed_tattoo(store, "t1", "A")

    updated = asyncio.run(crud_tattoo.update_tattoo(store, "t1", {"price": 200, "bodyPart": "Arm"}, "user-a"))

    assert updated.price == 200
    assert updated.body_part == "Arm"
    assert updated.description == "Fine line rose"
    doc = asyncio.run(store.get(TATTOOS_COLLECTION, "t1"))
    assert doc["price"] == 200
    assert doc["size"] == "Small"
    assert "updatedAt" in doc


def test_update_cannot_move_tattoo_to_other_artist(store):
    seed_artist(store, "A", user_id="user-a")
    seed_tattoo(store, "t1", "A")
    with pytest.raises(ValidationFailed):
        asyncio.run(crud_tattoo.update_tattoo(store, "t1", {"artistId": "B"}, "user-a"))


def test_update_rejects_non_positive_price(store):
    seed_artist(store, "A", user_id="user-a")
    seed_tattoo(store, "t1", "A")
    with pytest.raises(ValidationFailed):
        asyncio.run(crud_tattoo.update_tattoo(store, "t1", {"price": 0}, "user-a"))


def test_delete_by_owner(store):
    seed_artist(store, "A", user_id="user-a")
    seed_tattoo(store, "t1", "A")

    asyncio.run(crud_tattoo.delete_tattoo(store, "t1", "user-a"))
    with pytest.raises(NotFound):
        asyncio.run(crud_tattoo.get_tattoo(store, "t1"))


def test_list_by_artist_and_mine(store):
    seed_artist(store, "A", user_id="user-a")
    seed_artist(store, "B", user_id="user-b")
    seed_tattoo(store, "a1", "A")
    seed_tattoo(store, "a2", "A")
    seed_tattoo(store, "b1", "B")

    assert {t.id for t in asyncio.run(crud_tattoo.list_tattoos_by_artist(store, "A"))} == {"a1", "a2"}
    assert [t.id for t in asyncio.run(crud_tattoo.list_my_tattoos(store, "user-b"))] == ["b1"]
    assert asyncio.run(crud_tattoo.list_my_tattoos(store, "nobody")) == []
    assert len(asyncio.run(crud_tattoo.list_tattoos(store))) == 3
