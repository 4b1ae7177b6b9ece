from iac_loader import IacDocument, YAML_DOC


def make_document(**overrides):
    fields = {"start_line": 3, "end_line": 7, "file_path": "deploy/app.yaml"}
    fields.update(overrides)
    return IacDocument(**fields)


def test_defaults():
    doc = make_document()

    assert doc.kind == YAML_DOC
    assert doc.content is None
    assert not doc.has_content


def test_location_and_line_count():
    doc = make_document()

    assert doc.location == "deploy/app.yaml:3-7"
    assert doc.line_count == 5


def test_decode_content():
    doc = make_document(content=b"items:\n- 1\n- 2\n")

    assert doc.has_content
    assert doc.decode() == {"items": [1, 2]}


def test_decode_without_content():
    assert make_document().decode() is None


def test_content_can_be_attached_after_creation():
    doc = make_document()
    doc.content = b"a: 1\n"

    assert doc.decode() == {"a": 1}
