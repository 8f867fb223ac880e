from fndep.extract.function_extractor import (
    _body_templates,
    extract_bracketed_block,
    extract_functions,
    extract_indented_block,
    find_function_body,
    resolve_signature_name,
)


def _names(content: str, **kwargs) -> list[str]:
    return [item.name for item in extract_functions(content, **kwargs)]


def test_typed_signature_uses_identifier_after_primitive_type() -> None:
    content = "int add(int a, int b){ return a + b; }\nint main(){ return add(1,2); }"
    extracted = extract_functions(content)
    assert [item.name for item in extracted] == ["add", "main"]
    assert extracted[0].body == "add(int a, int b){ return a + b; }"
    assert extracted[1].body == "main(){ return add(1,2); }"


def test_resolve_signature_name() -> None:
    assert resolve_signature_name("int", "add") == "add"
    assert resolve_signature_name("vec3", "shade") == "shade"
    assert resolve_signature_name("samplerCube", "sky") == "sky"
    assert resolve_signature_name("Widget", "make") == "Widget"


def test_non_primitive_leading_token_is_taken_as_name() -> None:
    # "Point" is the candidate name; it has no definition of its own, so no body.
    content = "Point make_point(int x, int y) {\n    return build(x, y);\n}\n"
    assert _names(content) == []


def test_keyword_and_closure_templates() -> None:
    content = """
function render(items) {
    return layout(items);
}

const layout = (content) => {
    return wrap("<main>", content);
};

var wrap = function(tag, content) {
    return tag + content;
};
"""
    assert _names(content) == ["render", "wrap", "layout"]
    body = find_function_body(content, "layout")
    assert body.startswith("layout = (content) => {")
    assert body.endswith("}")


def test_indentation_delimited_body() -> None:
    content = (
        "def outer(x):\n"
        "    y = inner(x)\n"
        "\n"
        "    return y\n"
        "\n"
        "def inner(x):\n"
        "    return x + 1\n"
    )
    extracted = {item.name: item.body for item in extract_functions(content)}
    assert set(extracted) == {"outer", "inner"}
    assert extracted["outer"].startswith("def outer(x):")
    assert "return y" in extracted["outer"]
    assert "def inner" not in extracted["outer"]
    assert extracted["inner"].rstrip() == "def inner(x):\n    return x + 1"


def test_reserved_and_short_names_are_dropped() -> None:
    content = """
function a(x) { return x + 1000000; }
function sin(x) { return x * 100000; }
function Console(x) { return x * 100000; }
function keep(x) { return x * 100000; }
"""
    assert _names(content) == ["keep"]


def test_short_bodies_are_dropped() -> None:
    content = "function tiny() {}"
    assert _names(content) == []
    assert _names(content, min_body_length=0) == ["tiny"]


def test_same_name_from_two_templates_yields_two_candidates() -> None:
    content = """
function twice(a) {
    return a + 1;
}
var twice = function(b) {
    return b + 2;
};
"""
    extracted = extract_functions(content)
    assert [item.name for item in extracted] == ["twice", "twice"]


def test_malformed_text_yields_nothing() -> None:
    assert extract_functions("}}}{{{ ((( def :") == []
    assert extract_functions("") == []


def test_bracketed_block_counts_nested_braces() -> None:
    content = "f() { if (x) { y(); } } trailing"
    assert extract_bracketed_block(content, 0) == "f() { if (x) { y(); } }"


def test_bracketed_block_edge_cases() -> None:
    assert extract_bracketed_block("g() { {  }", 0) == "g() { {  }"
    assert extract_bracketed_block("no braces here", 0) == ""


def test_indented_block_edge_cases() -> None:
    assert extract_indented_block("def f():", 0) == "def f():"
    assert extract_indented_block("def f():\n\n   \n", 0) == "def f():"
    content = "def f():\n        deep()\n    shallow()\nafter()\n"
    assert extract_indented_block(content, 0) == "def f():\n        deep()"


def test_body_patterns_are_compiled_once_per_name() -> None:
    _body_templates.cache_clear()
    first = "int Mix_Colors(int a) {\n    return a * 2;\n}"
    second = "function mix_colors(a) {\n    return a + 1;\n}"
    assert find_function_body(first, "mix_colors") == first[len("int "):]
    assert find_function_body(second, "mix_colors") == second[len("function "):]
    assert _body_templates("mix_colors") is _body_templates("mix_colors")
    info = _body_templates.cache_info()
    assert info.misses == 1
    assert info.hits == 3
