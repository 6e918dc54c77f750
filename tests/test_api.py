import hashlib
from datetime import datetime
from urllib.parse import quote


def sha256_hash(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def test_create_string_success(client):
    resp = client.post("/strings", json={"value": "level"})
    assert resp.status_code == 201, resp.text
    data = resp.json()

    assert set(data) == {"id", "value", "properties", "created_at"}
    assert data["id"] == sha256_hash("level")
    assert data["value"] == "level"
    assert datetime.fromisoformat(data["created_at"].replace("Z", "+00:00")).tzinfo is not None

    props = data["properties"]
    assert props["length"] == 5
    assert props["is_palindrome"] is True
    assert props["word_count"] == 1
    assert props["unique_characters"] == 3
    assert props["sha256_hash"] == data["id"]
    assert props["character_frequency_map"] == {"l": 2, "e": 2, "v": 1}


def test_create_duplicate_conflict(client):
    assert client.post("/strings", json={"value": "level"}).status_code == 201
    resp = client.post("/strings", json={"value": "level"})
    assert resp.status_code == 409
    assert resp.json() == {"error": "String already exists in the system"}


def test_create_missing_value(client):
    resp = client.post("/strings", json={})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_create_without_body(client):
    assert client.post("/strings").status_code == 400


def test_create_invalid_json(client):
    resp = client.post("/strings", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_create_wrong_type(client):
    for bad in (123, None, ["a"], {"nested": "x"}, True):
        resp = client.post("/strings", json={"value": bad})
        assert resp.status_code == 422, bad
        assert "error" in resp.json()


def test_get_specific_string(client):
    value = "Able was I ere I saw Elba"
    client.post("/strings", json={"value": value})

    resp = client.get(f"/strings/{quote(value)}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["value"] == value
    assert data["properties"]["sha256_hash"] == sha256_hash(value)
    assert data["properties"]["is_palindrome"] is True


def test_get_value_with_slash(client):
    client.post("/strings", json={"value": "and/or"})
    resp = client.get("/strings/and/or")
    assert resp.status_code == 200
    assert resp.json()["value"] == "and/or"


def test_get_unknown_string(client):
    resp = client.get("/strings/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"error": "String does not exist in the system"}


def test_list_without_filters(client):
    for value in ("madam", "hello world"):
        client.post("/strings", json={"value": value})

    resp = client.get("/strings")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert {item["value"] for item in data["data"]} == {"madam", "hello world"}
    assert data["filters_applied"] == {}


def test_list_filters_is_palindrome_and_word_count(client):
    for value in ("madam", "hello world", "level", "step on no pets"):
        client.post("/strings", json={"value": value})

    resp = client.get("/strings", params={"is_palindrome": "true", "word_count": "1"})
    assert resp.status_code == 200
    data = resp.json()
    assert {item["value"] for item in data["data"]} == {"madam", "level"}
    assert data["count"] == 2
    assert data["filters_applied"] == {"is_palindrome": True, "word_count": 1}


def test_list_length_range_and_character(client):
    for value in ("ab", "abcd", "abcdef", "xyz"):
        client.post("/strings", json={"value": value})

    resp = client.get("/strings?min_length=2&max_length=4&contains_character=a")
    assert resp.status_code == 200
    data = resp.json()
    assert {item["value"] for item in data["data"]} == {"ab", "abcd"}
    assert data["filters_applied"] == {"min_length": 2, "max_length": 4, "contains_character": "a"}


def test_list_invalid_filters(client):
    for query in (
        "min_length=10&max_length=5",
        "is_palindrome=maybe",
        "min_length=-1",
        "max_length=ten",
        "word_count=1.5",
        "contains_character=ab",
        "contains_character=",
    ):
        resp = client.get(f"/strings?{query}")
        assert resp.status_code == 400, query
        assert "error" in resp.json()


def test_natural_language_filter(client):
    for value in ("mom", "noon", "notpal", "racecar cars"):
        client.post("/strings", json={"value": value})

    resp = client.get("/strings/filter-by-natural-language", params={"query": "all single word palindromic strings"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert {item["value"] for item in data["data"]} == {"mom", "noon"}
    assert data["interpreted_query"] == {
        "original": "all single word palindromic strings",
        "parsed_filters": {"is_palindrome": True, "word_count": 1},
    }


def test_natural_language_longer_than(client):
    for value in ("mom", "noon", "racecar"):
        client.post("/strings", json={"value": value})

    resp = client.get("/strings/filter-by-natural-language?query=palindromic strings longer than 3")
    assert resp.status_code == 200
    data = resp.json()
    assert data["interpreted_query"]["parsed_filters"] == {"is_palindrome": True, "min_length": 4}
    assert {item["value"] for item in data["data"]} == {"noon", "racecar"}


def test_natural_language_errors(client):
    assert client.get("/strings/filter-by-natural-language").status_code == 400
    assert client.get("/strings/filter-by-natural-language?query=").status_code == 400
    assert client.get("/strings/filter-by-natural-language?query=tell me a joke").status_code == 400

    resp = client.get(
        "/strings/filter-by-natural-language",
        params={"query": "words with the first vowel containing the letter z"},
    )
    assert resp.status_code == 422
    assert "error" in resp.json()


def test_delete_string(client):
    client.post("/strings", json={"value": "todelete"})

    resp = client.delete("/strings/todelete")
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get("/strings/todelete").status_code == 404
    assert client.delete("/strings/todelete").status_code == 404


def test_delete_unknown_string(client):
    resp = client.delete("/strings/never-created")
    assert resp.status_code == 404
    assert resp.json() == {"error": "String does not exist in the system"}


def test_recreate_after_delete(client):
    client.post("/strings", json={"value": "again"})
    client.delete("/strings/again")
    assert client.post("/strings", json={"value": "again"}).status_code == 201


def test_health_and_root(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"

    resp = client.get("/")
    assert resp.status_code == 200
    assert "POST /strings" in resp.json()["endpoints"]


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "error" in resp.json()
