"""Topics & Users API — unparameterized listings."""


async def test_get_topics(client):
    res = await client.get("/api/topics")
    assert res.status_code == 200
    topics = res.json()["topics"]
    assert len(topics) == 3
    for topic in topics:
        assert set(topic) == {"slug", "description"}
        assert isinstance(topic["slug"], str)
        assert isinstance(topic["description"], str)


async def test_get_users(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    users = res.json()["users"]
    assert len(users) == 4
    assert {u["username"] for u in users} == {
        "butter_bridge", "icellusedkars", "rogersop", "lurker",
    }
    for user in users:
        assert set(user) == {"username", "name", "avatar_url"}
