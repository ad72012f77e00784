import cbor2
import pytest

from rankeval import ConfigurationError, ContentType, MalformedDocumentError, dump_document, load_document

TREE = {
    "id": "spec",
    "request": {"query": {"match_all": {}}, "size": 10},
    "ratings": [{"key": {"index": "i", "type": "t", "doc_id": "1"}, "rating": 1}],
}


@pytest.mark.parametrize("content_type", list(ContentType))
@pytest.mark.parametrize("pretty", [False, True])
def test_dump_and_load_preserve_tree(content_type, pretty) -> None:
    payload = dump_document(TREE, content_type, pretty=pretty)

    assert isinstance(payload, bytes)
    assert load_document(payload, content_type) == TREE


def test_json_pretty_print_is_indented_and_compact_is_single_line() -> None:
    pretty = dump_document(TREE, ContentType.JSON, pretty=True).decode("utf-8")
    compact = dump_document(TREE, ContentType.JSON).decode("utf-8")

    assert '\n  "id": "spec"' in pretty
    assert "\n" not in compact
    assert compact.startswith('{"id":"spec"')


def test_yaml_pretty_print_uses_block_style() -> None:
    pretty = dump_document(TREE, ContentType.YAML, pretty=True).decode("utf-8")
    compact = dump_document(TREE, ContentType.YAML).decode("utf-8")

    assert pretty.startswith("id: spec\n")
    assert compact.startswith("{")


def test_member_order_is_preserved_on_write() -> None:
    tree = {"ratings": [], "id": "spec"}

    for content_type in ContentType:
        loaded = load_document(dump_document(tree, content_type), content_type)
        assert list(loaded) == ["ratings", "id"]


def test_json_unicode_is_written_as_is() -> None:
    payload = dump_document({"id": "검색"}, ContentType.JSON)

    assert "검색" in payload.decode("utf-8")


@pytest.mark.parametrize(
    ("content_type", "payload"),
    [
        (ContentType.JSON, b'{"id": '),
        (ContentType.YAML, b"id: [unclosed"),
        (ContentType.CBOR, cbor2.dumps({"id": "spec"})[:-1]),
    ],
)
def test_undecodable_payload_is_malformed(content_type, payload) -> None:
    with pytest.raises(MalformedDocumentError):
        load_document(payload, content_type)


@pytest.mark.parametrize("content_type", list(ContentType))
def test_non_object_root_is_malformed(content_type) -> None:
    payload = dump_document(["id"], content_type)

    with pytest.raises(MalformedDocumentError, match="list"):
        load_document(payload, content_type)


def test_duplicate_json_member_is_malformed() -> None:
    with pytest.raises(MalformedDocumentError, match="field=id"):
        load_document(b'{"id": "a", "id": "b"}', ContentType.JSON)


def test_cbor_requires_bytes() -> None:
    with pytest.raises(MalformedDocumentError):
        load_document("{}", ContentType.CBOR)


def test_content_type_accepts_string_values() -> None:
    assert load_document(dump_document(TREE, "yaml"), "yaml") == TREE


def test_unknown_content_type_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="xml"):
        dump_document(TREE, "xml")


LINE_BREAK_STRINGS = [
    "a\x85b",
    "a\u2028b",
    "a\u2029b",
    "line\nbreak",
    "tab\tseparated",
    "carriage\r\nreturn",
    " leading and trailing ",
    "검색 질의",
    "no-break\u00a0space",
    "quote ' and \" mixed: {x}, [y] # z",
]


@pytest.mark.parametrize("content_type", list(ContentType))
@pytest.mark.parametrize("pretty", [False, True])
@pytest.mark.parametrize("text", LINE_BREAK_STRINGS)
def test_strings_with_line_breaks_and_non_ascii_survive(content_type, pretty, text) -> None:
    tree = {"id": text, "params": {"values": [text, {"nested": text}]}}

    assert load_document(dump_document(tree, content_type, pretty=pretty), content_type) == tree


def test_yaml_output_escapes_non_ascii() -> None:
    payload = dump_document({"id": "a\x85b 검색"}, ContentType.YAML)

    assert payload.isascii()
    assert load_document(payload, ContentType.YAML) == {"id": "a\x85b 검색"}


@pytest.mark.parametrize(
    ("content_type", "payload"),
    [
        (ContentType.JSON, b'{"id":"x","template_id":"t","params":' + b"[" * 100_000 + b"]" * 100_000 + b"}"),
        (ContentType.YAML, b"id: x\nparams: " + b"[" * 5_000 + b"]" * 5_000 + b"\n"),
        (ContentType.CBOR, b"\xa1\x61p" + b"\x81" * 100_000 + b"\x00"),
    ],
)
def test_nesting_beyond_decoder_limit_is_malformed(content_type, payload) -> None:
    with pytest.raises(MalformedDocumentError):
        load_document(payload, content_type)


@pytest.mark.parametrize("payload", [b"id: a\nid: b\n", b"{id: a, id: b}"])
def test_duplicate_yaml_member_is_malformed(payload) -> None:
    with pytest.raises(MalformedDocumentError, match="field=id"):
        load_document(payload, ContentType.YAML)


def test_yaml_merge_key_override_is_not_a_duplicate() -> None:
    payload = b"base: &base {x: 1, y: 1}\nchild:\n  <<: *base\n  x: 2\n"

    assert load_document(payload, ContentType.YAML)["child"] == {"x": 2, "y": 1}
