from fndep.cache import FunctionCache, FunctionRecord


def test_first_definition_wins() -> None:
    cache = FunctionCache()
    assert cache.add("x", "a.c", "x() { return 1; }") is True
    assert cache.add("x", "b.c", "x() { return 2; }") is False

    record = cache.get("x")
    assert record == FunctionRecord(name="x", source_location="a.c", body="x() { return 1; }")
    assert cache.functions_found == 1
    assert len(cache) == 1


def test_lookup_and_counters() -> None:
    cache = FunctionCache()
    cache.add("beta", "b.js", "beta() {}")
    cache.add("alpha", "a.js", "alpha() {}")
    cache.mark_file_processed()
    cache.mark_file_processed()

    assert cache.has("alpha")
    assert "beta" in cache
    assert not cache.has("gamma")
    assert cache.get("gamma") is None
    assert cache.names() == ["beta", "alpha"]
    assert [record.name for record in cache] == ["beta", "alpha"]
    assert cache.files_processed == 2
    assert cache.functions_found == 2
