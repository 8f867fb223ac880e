from __future__ import annotations

from fastapi.testclient import TestClient

from fndep.api.rest.app import create_app
from fndep.context import AnalysisContext
from fndep.usecases.build_cache import text_source

EXAMPLE = "int add(int a, int b){ return a + b; }\nint main(){ return add(1,2); }"


def _client() -> TestClient:
    context = AnalysisContext()
    context.load([text_source("a.c", EXAMPLE)])
    return TestClient(create_app(context))


def test_healthz() -> None:
    assert _client().get("/healthz").json() == {"status": "ok"}


def test_function_listing_and_lookup() -> None:
    client = _client()
    listing = client.get("/functions").json()
    assert listing == {
        "functions": [
            {"name": "add", "source_location": "a.c"},
            {"name": "main", "source_location": "a.c"},
        ]
    }
    record = client.get("/functions/add").json()
    assert record["body"] == "add(int a, int b){ return a + b; }"
    assert client.get("/functions/nope").json() == {"error": "not_found"}


def test_analyze_endpoint() -> None:
    payload = _client().get("/analyze/main", params={"max_depth": 3}).json()
    assert payload["found"] is True
    assert [item["name"] for item in payload["sorted_functions"]] == ["add", "main"]
    assert payload["graph"]["main"]["calls"] == ["add"]

    missing = _client().get("/analyze/ghost").json()
    assert missing["found"] is False
    assert missing["not_found"] == ["ghost"]
