from datetime import date

import pytest

from climate.extensions import db
from climate.models import CarbonEntry
from climate.services import get_analytics


def _create(client, user, **body):
    response = client.post("/api/carbon/entries", json=body, headers=user["headers"])
    assert response.status_code == 201, response.get_json()
    return response.get_json()["payload"]


def test_transport_entry_and_total_footprint(client, user):
    entry = _create(client, user, category="transport", value=10, date="2026-10-01")
    assert entry["calculated_emissions"] == pytest.approx(2.0)

    analytics = client.get("/api/carbon/analytics", headers=user["headers"])
    assert analytics.status_code == 200
    assert analytics.get_json()["payload"]["total_footprint"] == pytest.approx(2.0)


def test_created_entry_is_listed_with_same_emissions(client, user):
    created = _create(client, user, category="food", value=4)

    response = client.get("/api/carbon/entries", headers=user["headers"])
    entries = response.get_json()["payload"]
    match = [e for e in entries if e["id"] == created["id"]]
    assert len(match) == 1
    assert match[0]["calculated_emissions"] == pytest.approx(6.0)
    assert match[0]["date"] == date.today().isoformat()


def test_unknown_category_uses_raw_value(client, user):
    entry = _create(client, user, category="flights", value=42)
    assert entry["calculated_emissions"] == pytest.approx(42.0)


def test_entries_ordered_by_date_desc(client, user):
    _create(client, user, category="energy", value=1, date="2026-01-10")
    _create(client, user, category="energy", value=1, date="2026-03-10")
    _create(client, user, category="energy", value=1, date="2026-02-10")

    entries = client.get("/api/carbon/entries", headers=user["headers"]).get_json()["payload"]
    assert [e["date"] for e in entries] == ["2026-03-10", "2026-02-10", "2026-01-10"]


def test_invalid_value_rejected(client, user):
    response = client.post(
        "/api/carbon/entries",
        json={"category": "transport", "value": "molto"},
        headers=user["headers"],
    )
    assert response.status_code == 400


def test_update_recomputes_emissions(client, user):
    entry = _create(client, user, category="transport", value=10)

    response = client.put(
        f"/api/carbon/entries/{entry['id']}",
        json={"category": "energy", "value": 10, "date": "2026-05-01"},
        headers=user["headers"],
    )
    assert response.status_code == 200
    payload = response.get_json()["payload"]
    assert payload["category"] == "energy"
    assert payload["calculated_emissions"] == pytest.approx(5.0)
    assert payload["date"] == "2026-05-01"


def test_other_user_cannot_touch_entry(client, user, other_user):
    entry = _create(client, user, category="transport", value=10)

    response = client.put(
        f"/api/carbon/entries/{entry['id']}",
        json={"category": "transport", "value": 1},
        headers=other_user["headers"],
    )
    assert response.status_code == 404

    response = client.delete(f"/api/carbon/entries/{entry['id']}", headers=other_user["headers"])
    assert response.status_code == 404

    listed = client.get("/api/carbon/entries", headers=other_user["headers"]).get_json()
    assert listed["payload"] == []


def test_delete_entry(client, user):
    entry = _create(client, user, category="food", value=1)

    response = client.delete(f"/api/carbon/entries/{entry['id']}", headers=user["headers"])
    assert response.status_code == 200

    response = client.delete(f"/api/carbon/entries/{entry['id']}", headers=user["headers"])
    assert response.status_code == 404


def test_analytics_groups_by_category_and_month(app, user):
    today = date(2026, 10, 19)
    rows = [
        ("transport", 10, date(2026, 10, 2)),   # 2.0
        ("transport", 20, date(2026, 9, 15)),   # 4.0
        ("food", 2, date(2026, 9, 1)),          # 3.0
        ("energy", 10, date(2026, 4, 30)),      # 5.0, fuori dagli ultimi sei mesi
    ]
    with app.app_context():
        for category, value, entry_date in rows:
            entry = CarbonEntry(user_id=user["id"], date=entry_date)
            entry.set_measure(category, value)
            db.session.add(entry)
        db.session.commit()

        analytics = get_analytics(user["id"], today=today).to_dict()

    by_category = {row["category"]: row["total_emissions"] for row in analytics["total_by_category"]}
    assert by_category == pytest.approx({"energy": 5.0, "food": 3.0, "transport": 6.0})

    assert analytics["monthly_emissions"] == [
        {"month": "2026-09", "total_emissions": pytest.approx(7.0)},
        {"month": "2026-10", "total_emissions": pytest.approx(2.0)},
    ]
    assert analytics["total_footprint"] == pytest.approx(14.0)


def test_analytics_empty(client, user):
    payload = client.get("/api/carbon/analytics", headers=user["headers"]).get_json()["payload"]
    assert payload == {"total_by_category": [], "monthly_emissions": [], "total_footprint": 0.0}
