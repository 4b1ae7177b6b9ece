import pytest

from iac_loader import LoaderConfig, YAMLLoader, get_loader, supported_kinds


def test_supported_kinds():
    assert supported_kinds() == ["yaml"]


def test_get_yaml_loader():
    loader = get_loader("yaml")

    assert isinstance(loader, YAMLLoader)
    assert loader.kind == "yaml"
    assert loader.config == LoaderConfig()


def test_config_is_passed_to_loader():
    config = LoaderConfig(indent=4)

    assert get_loader("yaml", config).config is config


def test_unknown_kind():
    with pytest.raises(ValueError, match="Supported kinds: yaml"):
        get_loader("hcl")


def test_loader_reads_file(tmp_path):
    path = tmp_path / "app.yaml"
    path.write_text("a: 1\n---\nb: 2\n", encoding="utf-8")

    documents = get_loader("yaml").load(path)

    assert [doc.decode() for doc in documents] == [{"a": 1}, {"b": 2}]
