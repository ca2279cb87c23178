def test_contact_form(client):
    resp = client.post("/api/contact", json={
        "firstName": "Jane", "lastName": "Doe", "email": "a@x.com", "message": "Hello",
    })
    assert resp.status_code == 200
    assert resp.json() == {"message": "Message saved successfully!"}

    contacts = client.get("/api/contacts").json()
    assert len(contacts) == 1
    assert contacts[0]["message"] == "Hello"

    assert client.delete(f"/api/contacts/{contacts[0]['id']}").status_code == 200
    assert client.get("/api/contacts").json() == []
    assert client.delete(f"/api/contacts/{contacts[0]['id']}").status_code == 404


def test_contact_requires_all_fields(client):
    resp = client.post("/api/contact", json={"firstName": "Jane", "email": "a@x.com"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "All fields are required"


def test_subscribe_twice_is_conflict(client):
    assert client.post("/api/subscribe", json={"email": "a@x.com"}).status_code == 200

    resp = client.post("/api/subscribe", json={"email": "a@x.com"})
    assert resp.status_code == 409
    assert resp.json()["message"] == "Already subscribed"

    subscribers = client.get("/api/subscribers").json()
    assert [s["email"] for s in subscribers] == ["a@x.com"]
    assert client.delete(f"/api/subscribers/{subscribers[0]['id']}").status_code == 200


def test_subscribe_requires_email(client):
    resp = client.post("/api/subscribe", json={})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Email is required"


def test_reviews_newest_first(client):
    first = client.post("/api/reviews", json={"name": "A", "rating": 5, "comment": "Great"})
    assert first.status_code == 201
    assert first.json() == {"id": first.json()["id"], "name": "A", "rating": 5, "comment": "Great"}
    client.post("/api/reviews", json={"name": "B", "rating": 3, "comment": "Okay"})

    reviews = client.get("/api/reviews").json()
    assert [r["name"] for r in reviews] == ["B", "A"]


def test_review_blank_comment_rejected(client):
    resp = client.post("/api/reviews", json={"name": "A", "rating": 5, "comment": "   "})
    assert resp.status_code == 400
