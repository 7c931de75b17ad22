"""
Tests for the card endpoints.
"""

CARDS = "/api/v1/cards"


def _create(client, headers, **fields):
    payload = {"title": "An idea worth keeping"}
    payload.update(fields)
    response = client.post(CARDS, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_requires_a_session(client):
    response = client.post(CARDS, json={"title": "Anonymous"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated."


def test_invalid_token_is_not_a_session(client):
    response = client.post(CARDS, json={"title": "x"}, headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401


def test_listing_while_logged_out_is_empty(client):
    response = client.get(CARDS)

    assert response.status_code == 200
    assert response.json() == {"cards": [], "total": 0}


def test_rules_card_is_processed(client, auth_headers):
    card = _create(client, auth_headers, category="Rules", status="Unprocessed")

    assert card["category"] == "Rules"
    assert card["status"] == "Processed"


def test_unprocessed_card_is_unprocessed(client, auth_headers):
    card = _create(client, auth_headers)

    assert card["category"] == "Unprocessed"
    assert card["status"] == "Unprocessed"
    assert card["source_type"] == "Note"


def test_update_category_rederives_status(client, auth_headers):
    card = _create(client, auth_headers)

    response = client.put(f"{CARDS}/{card['id']}", json={"category": "Literature I Love"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "Processed"

    response = client.put(f"{CARDS}/{card['id']}", json={"category": "Unprocessed"}, headers=auth_headers)
    assert response.json()["status"] == "Unprocessed"


def test_update_keeps_omitted_fields(client, auth_headers):
    card = _create(client, auth_headers, body="Original body", scripture="John 1:1")

    response = client.put(f"{CARDS}/{card['id']}", json={"title": "Renamed"}, headers=auth_headers)

    updated = response.json()
    assert updated["title"] == "Renamed"
    assert updated["body"] == "Original body"
    assert updated["scripture"] == "John 1:1"


def test_update_with_null_clears_optional_text(client, auth_headers):
    card = _create(client, auth_headers, source_title="Knowing God", source_url="https://example.com", scripture="Ps 23")

    response = client.put(
        f"{CARDS}/{card['id']}",
        json={"source_title": None, "scripture": None},
        headers=auth_headers
    )

    updated = response.json()
    assert updated["source_title"] is None
    assert updated["scripture"] is None
    assert updated["source_url"] == "https://example.com"


def test_invalid_category_is_rejected(client, auth_headers):
    response = client.post(CARDS, json={"title": "x", "category": "Poems"}, headers=auth_headers)

    assert response.status_code == 422


def test_unknown_topic_link_is_rejected(client, auth_headers):
    response = client.post(CARDS, json={"title": "x", "connected_topic_ids": [12345]}, headers=auth_headers)

    assert response.status_code == 400
    assert "12345" in response.json()["detail"]


def test_list_is_newest_first_and_filterable(client, auth_headers):
    first = _create(client, auth_headers, title="Covenant theology notes", category="Studies")
    second = _create(client, auth_headers, title="Meeting rules", category="Rules", body="Start on time")
    third = _create(client, auth_headers, title="Loose thought")

    response = client.get(CARDS, headers=auth_headers)
    ids = [card["id"] for card in response.json()["cards"]]
    assert ids == [third["id"], second["id"], first["id"]]

    response = client.get(CARDS, params={"category": "Rules"}, headers=auth_headers)
    assert [card["id"] for card in response.json()["cards"]] == [second["id"]]

    response = client.get(CARDS, params={"search": "ON TIME"}, headers=auth_headers)
    assert [card["id"] for card in response.json()["cards"]] == [second["id"]]


def test_filter_by_topic(client, auth_headers):
    topic = client.post("/api/v1/topics", json={"kind": "new-root", "title": "Prayer"}, headers=auth_headers).json()
    linked = _create(client, auth_headers, connected_topic_ids=[topic["id"], topic["id"]])
    _create(client, auth_headers, title="Unlinked card")

    assert linked["connected_topic_ids"] == [topic["id"]]
    response = client.get(CARDS, params={"topic_id": topic["id"]}, headers=auth_headers)
    assert [card["id"] for card in response.json()["cards"]] == [linked["id"]]


def test_kanban_has_every_category_in_order(client, auth_headers):
    _create(client, auth_headers, category="Courses")
    _create(client, auth_headers)

    response = client.get(f"{CARDS}/kanban", headers=auth_headers)

    columns = response.json()["columns"]
    assert [column["category"] for column in columns] == [
        "Unprocessed", "Studies", "Rules", "Articles", "Courses", "Literature I Love"
    ]
    assert len(columns[0]["cards"]) == 1
    assert len(columns[4]["cards"]) == 1
    assert columns[1]["cards"] == []


def test_cards_are_private_to_their_owner(client, auth_headers, login):
    card = _create(client, auth_headers)
    other = login("other@example.com")

    assert client.get(f"{CARDS}/{card['id']}", headers=other).status_code == 404
    assert client.delete(f"{CARDS}/{card['id']}", headers=other).status_code == 404
    assert client.get(CARDS, headers=other).json()["total"] == 0


def test_delete_card(client, auth_headers):
    card = _create(client, auth_headers)

    response = client.delete(f"{CARDS}/{card['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"{CARDS}/{card['id']}", headers=auth_headers).status_code == 404
