"""
Tests for the import triage endpoints.
"""
from app.core.config import settings

IMPORTS = "/api/v1/imports"

DOCUMENT = "\n\n".join([
    "Abide in the vine, for apart from it you can do nothing.",
    "Short",
    "Pray without ceasing, and give thanks in every circumstance.",
    "The fear of the Lord is the beginning of wisdom.",
])


def _upload(client, headers, text=DOCUMENT, filename="Devotional Notes.txt"):
    return client.post(
        IMPORTS,
        files={"file": (filename, text.encode("utf-8"), "text/plain")},
        headers=headers
    )


def _started(client, headers, **kwargs):
    response = _upload(client, headers, **kwargs)
    assert response.status_code == 201, response.text
    return response.json()


def test_upload_requires_a_session(client):
    response = _upload(client, {})

    assert response.status_code == 401


def test_upload_lands_on_the_first_draft(client, auth_headers):
    started = _started(client, auth_headers)

    assert started["state"] == "triage"
    assert started["filename"] == "Devotional Notes.txt"
    assert started["total_chunks"] == 3
    assert started["current_index"] == 0
    assert started["progress"] == 0
    assert started["message"] is None
    draft = started["draft"]
    assert draft["body"].startswith("Abide in the vine")
    assert draft["category"] == "Studies"


def test_unsupported_file_type(client, auth_headers):
    response = _upload(client, auth_headers, filename="slides.pdf")

    assert response.status_code == 400
    assert response.json()["detail"] == "Unsupported file type. Please upload .txt, .md, or .docx"


def test_document_without_paragraphs(client, auth_headers):
    response = _upload(client, auth_headers, text="tiny\n\nbits\n\nonly")

    assert response.status_code == 400
    assert response.json()["detail"].startswith("No content found.")


def test_large_documents_are_capped(client, auth_headers):
    text = "\n\n".join(f"Paragraph number {i:03d} of a very long sermon." for i in range(600))

    started = _started(client, auth_headers, text=text)

    assert started["total_chunks"] == 500
    assert started["total_found"] == 600
    assert started["truncated_count"] == 100
    assert started["message"] == "Found 600 paragraphs; only the first 500 were imported (100 skipped)."


def test_upload_over_the_size_cap(client, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_bytes", len(DOCUMENT.encode("utf-8")))

    assert _upload(client, auth_headers).status_code == 201
    response = _upload(client, auth_headers, text=DOCUMENT + "!")

    assert response.status_code == 413


def test_walking_every_draft_completes(client, auth_headers):
    started = _started(client, auth_headers)
    url = f"{IMPORTS}/{started['id']}"

    approved = client.post(f"{url}/approve", headers=auth_headers)
    assert approved.status_code == 200, approved.text
    card = approved.json()["card"]
    assert card["source_type"] == "Note"
    assert card["source_title"] == "Devotional Notes"
    assert card["status"] == "Processed"
    assert approved.json()["session"]["current_index"] == 1

    skipped = client.post(f"{url}/skip", headers=auth_headers).json()
    assert skipped["current_index"] == 2

    finished = client.post(f"{url}/approve", headers=auth_headers).json()["session"]
    assert finished["state"] == "complete"
    assert finished["draft"] is None
    assert finished["approved"] + finished["skipped"] == finished["total_chunks"]
    assert finished["progress"] == 100

    cards = client.get("/api/v1/cards", headers=auth_headers).json()
    assert cards["total"] == 2


def test_actions_after_complete_are_conflicts(client, auth_headers):
    started = _started(client, auth_headers)
    url = f"{IMPORTS}/{started['id']}"
    for _ in range(3):
        client.post(f"{url}/skip", headers=auth_headers)

    assert client.post(f"{url}/approve", headers=auth_headers).status_code == 409
    assert client.post(f"{url}/skip", headers=auth_headers).status_code == 409


def test_edits_flow_into_the_card(client, auth_headers):
    topic = client.post("/api/v1/topics", json={"kind": "new-root", "title": "Prayer"}, headers=auth_headers).json()
    started = _started(client, auth_headers)
    url = f"{IMPORTS}/{started['id']}"

    edited = client.patch(
        f"{url}/draft",
        json={"title": "Abide", "category": "Rules", "scripture": "John 15:5"},
        headers=auth_headers
    )
    assert edited.status_code == 200
    assert edited.json()["draft"]["title"] == "Abide"

    approved = client.post(f"{url}/approve", json={"connected_topic_ids": [topic["id"]]}, headers=auth_headers)

    card = approved.json()["card"]
    assert card["title"] == "Abide"
    assert card["category"] == "Rules"
    assert card["scripture"] == "John 15:5"
    assert card["connected_topic_ids"] == [topic["id"]]


def test_draft_cannot_be_unprocessed(client, auth_headers):
    started = _started(client, auth_headers)

    response = client.patch(
        f"{IMPORTS}/{started['id']}/draft", json={"category": "Unprocessed"}, headers=auth_headers
    )

    assert response.status_code == 400


def test_failed_approve_stays_on_the_draft(client, auth_headers):
    started = _started(client, auth_headers)
    url = f"{IMPORTS}/{started['id']}"

    response = client.post(f"{url}/approve", json={"connected_topic_ids": [4242]}, headers=auth_headers)

    assert response.status_code == 400
    current = client.get(url, headers=auth_headers).json()
    assert current["current_index"] == 0
    assert current["approved"] == 0
    assert client.get("/api/v1/cards", headers=auth_headers).json()["total"] == 0


def test_reset_returns_to_upload(client, auth_headers):
    started = _started(client, auth_headers)
    url = f"{IMPORTS}/{started['id']}"
    client.post(f"{url}/skip", headers=auth_headers)

    reset = client.post(f"{url}/reset", headers=auth_headers).json()

    assert reset["state"] == "upload"
    assert reset["total_chunks"] == 0
    assert reset["skipped"] == 0
    assert reset["draft"] is None


def test_sessions_are_private_to_their_owner(client, auth_headers, login):
    started = _started(client, auth_headers)
    other = login("stranger@example.com")

    assert client.get(f"{IMPORTS}/{started['id']}", headers=other).status_code == 404
    assert client.post(f"{IMPORTS}/{started['id']}/skip", headers=other).status_code == 404
