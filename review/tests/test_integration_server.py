import pytest
import requests
import uuid
import logging

BASE_URL = "http://127.0.0.1:8000/api"
# Must exist on the running server (e.g. `manage.py createsuperuser`)
USERNAME = "testuser"
HEADERS = {"X-User-NAME": USERNAME}
logger = logging.getLogger(__name__)

def register(source_id, source_type="wrong_note"):
    """Helper for POST /review-items"""
    r = requests.post(
        f"{BASE_URL}/review-items",
        json={"source_type": source_type, "source_id": str(source_id)},
        headers=HEADERS,
    )
    logger.info("POST /review-items source=%s → status=%s", source_id, r.status_code)
    return r


def rate(item_id, rating):
    """Helper for POST /review-items/{id}/rate"""
    r = requests.post(f"{BASE_URL}/review-items/{item_id}/rate", json={"rating": rating}, headers=HEADERS)
    data = r.json()
    logger.info(
        "POST /rate rating=%s → status=%s box=%s next=%s",
        rating, r.status_code, data.get("box"), data.get("next_review_at"),
    )
    return r


@pytest.mark.integration
def test_register_idempotent_live():
    """Same source registered twice → 201 then 200, same id"""
    source_id = uuid.uuid4()
    first = register(source_id)
    second = register(source_id)
    assert first.status_code == 201
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    logger.info("✓ Passed: idempotent registration")


@pytest.mark.integration
def test_know_then_forgot_live():
    """know moves up one box, forgot resets to box 1"""
    item_id = register(uuid.uuid4()).json()["id"]

    d1 = rate(item_id, "know").json()
    assert d1["box"] == 2

    d2 = rate(item_id, "forgot").json()
    assert d2["box"] == 1
    assert d2["last_reviewed_at"] is not None
    logger.info("✓ Passed: box transitions")


@pytest.mark.integration
def test_queue_excludes_rated_item_live():
    """A freshly rated item is no longer due today"""
    item_id = register(uuid.uuid4()).json()["id"]
    rate(item_id, "again")

    r = requests.get(f"{BASE_URL}/review-queue", params={"filter": "today"}, headers=HEADERS)
    assert item_id not in [i["id"] for i in r.json()["items"]]
    logger.info("✓ Passed: queue excludes rated item")
