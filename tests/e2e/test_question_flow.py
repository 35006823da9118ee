"""End-to-end tests for asking, voting on and answering questions."""

from tests.harness import create_client_fixture

client = create_client_fixture()


def auth_headers(client, username: str) -> dict[str, str]:
    response = client.post(
        "/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "hunter22",
        },
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


def ask(client, headers, **form) -> dict:
    data = {
        "title": "How do I reverse a list in Python?",
        "description": "I have a list and want it in the opposite order.",
        **form,
    }
    response = client.post("/questions", data=data, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestQuestionFlow:
    """Question lifecycle through the HTTP API."""

    def test_vote_cycle_and_answer(self, client):
        """Votes switch sides and an answer starts unaccepted with no votes."""
        # Arrange
        alice = auth_headers(client, "alice")
        bob = auth_headers(client, "bob")
        question = ask(client, alice, tags="Python, Lists")
        url = f"/questions/{question['question_id']}"

        # Act & Assert
        up = client.post(f"{url}/vote", json={"voteType": "upvote"}, headers=bob)
        assert up.status_code == 200
        assert up.json()["score"] == 1
        assert up.json()["user_vote"] == "upvote"

        down = client.post(f"{url}/vote", json={"voteType": "downvote"}, headers=bob)
        assert down.json()["score"] == -1

        removed = client.post(f"{url}/vote", json={"voteType": "remove"}, headers=bob)
        assert removed.json()["score"] == 0
        assert removed.json()["user_vote"] is None

        answered = client.post(
            f"{url}/answers",
            json={"content": "This is a valid answer body"},
            headers=bob,
        )
        assert answered.status_code == 201
        assert answered.json()["answer_count"] == 1
        answer = answered.json()["answer"]
        assert answer["is_accepted"] is False
        assert answer["upvote_count"] == 0
        assert answer["downvote_count"] == 0

        detail = client.get(url).json()
        assert detail["tags"] == ["python", "lists"]
        assert [a["content"] for a in detail["answers"]] == [
            "This is a valid answer body"
        ]

    def test_self_vote_is_forbidden(self, client):
        alice = auth_headers(client, "alice")
        question = ask(client, alice)

        response = client.post(
            f"/questions/{question['question_id']}/vote",
            json={"voteType": "upvote"},
            headers=alice,
        )

        assert response.status_code == 403

    def test_invalid_vote_type(self, client):
        alice = auth_headers(client, "alice")
        bob = auth_headers(client, "bob")
        question = ask(client, alice)

        response = client.post(
            f"/questions/{question['question_id']}/vote",
            json={"voteType": "sideways"},
            headers=bob,
        )

        assert response.status_code == 400

    def test_asking_requires_authentication(self, client):
        response = client.post(
            "/questions",
            data={
                "title": "How do I reverse a list in Python?",
                "description": "I have a list and want it in the opposite order.",
            },
        )

        assert response.status_code == 401

    def test_attachment_upload(self, client):
        alice = auth_headers(client, "alice")

        response = client.post(
            "/questions",
            data={
                "title": "What is wrong with this chart?",
                "description": "The axis labels overlap, see the screenshot.",
            },
            files=[("attachments", ("chart.png", b"\x89PNG\r\n", "image/png"))],
            headers=alice,
        )

        assert response.status_code == 201
        [attachment] = response.json()["attachments"]
        assert attachment["original_name"] == "chart.png"
        assert attachment["mimetype"] == "image/png"

    def test_rejected_attachment(self, client):
        alice = auth_headers(client, "alice")

        response = client.post(
            "/questions",
            data={
                "title": "Can you review my script?",
                "description": "Attached is the script that fails to run.",
            },
            files=[("attachments", ("run.sh", b"echo hi", "text/x-sh"))],
            headers=alice,
        )

        assert response.status_code == 400

    def test_views_count_once_per_user(self, client):
        alice = auth_headers(client, "alice")
        bob = auth_headers(client, "bob")
        question = ask(client, alice)
        url = f"/questions/{question['question_id']}"

        client.get(url, headers=bob)
        client.get(url, headers=bob)
        client.get(url)  # anonymous reads are not counted
        detail = client.get(url, headers=bob).json()

        assert detail["views"] == 1

    def test_accept_and_delete(self, client):
        # Arrange
        alice = auth_headers(client, "alice")
        bob = auth_headers(client, "bob")
        question = ask(client, alice)
        url = f"/questions/{question['question_id']}"
        answer = client.post(
            f"{url}/answers", json={"content": "Use slicing: items[::-1]"}, headers=bob
        ).json()["answer"]

        # Act
        accepted = client.put(
            f"{url}/answers/{answer['answer_id']}/accept", json={}, headers=alice
        )
        forbidden = client.delete(url, headers=bob)
        deleted = client.delete(url, headers=alice)

        # Assert
        assert accepted.status_code == 200
        assert accepted.json()["is_accepted"] is True
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert client.get(url).status_code == 404

    def test_list_ignores_unknown_topic_and_author(self, client):
        alice = auth_headers(client, "alice")
        ask(client, alice)

        listed = client.get("/questions")
        unknown_topic = client.get("/questions", params={"topic": "nope"})
        unknown_author = client.get("/questions", params={"author": "nobody"})

        assert listed.status_code == 200
        assert listed.json()["pagination"]["total"] == 1
        assert unknown_topic.status_code == 200
        assert unknown_topic.json()["pagination"]["total"] == 1
        assert unknown_author.json()["pagination"]["total"] == 1

    def test_list_defaults_to_newest_first(self, client):
        """Answering an older question does not move it ahead of newer ones."""
        # Arrange
        alice = auth_headers(client, "alice")
        bob = auth_headers(client, "bob")
        older = ask(client, alice, title="Which list method sorts in place?")
        newer = ask(client, alice, title="How do I copy a dictionary safely?")
        client.post(
            f"/questions/{older['question_id']}/answers",
            json={"content": "list.sort() sorts in place."},
            headers=bob,
        )

        # Act
        listed = client.get("/questions")

        # Assert
        assert [q["question_id"] for q in listed.json()["questions"]] == [
            newer["question_id"],
            older["question_id"],
        ]

    def test_malformed_question_id(self, client):
        assert client.get("/questions/not-a-uuid").status_code == 400
