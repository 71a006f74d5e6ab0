import pytest
from types import MappingProxyType
from file_library.classify import extension_of, extension_to_preview_kind
from file_library import config


@pytest.mark.parametrize(
    "ext,expected",
    [
        ("pdf", "pdf"),
        ("png", "image"),
        ("jpg", "image"),
        ("jpeg", "image"),
        ("webp", "image"),
        ("gif", "image"),
        ("svg", "image"),
        ("mp4", "video"),
        ("webm", "video"),
        ("mp3", "audio"),
        ("wav", "audio"),
        ("ogg", "audio"),
        ("html", "html"),
        ("htm", "html"),
        ("txt", "text"),
        ("md", "text"),
        ("PNG", "image"),
    ],
)
def test_known_extensions(ext, expected):
    assert extension_to_preview_kind(ext) == expected


@pytest.mark.parametrize("ext", ["", "zip", "docx", "tar.gz", "p", " pdf", "📄"])
def test_unknown_extensions_fall_back_to_link(ext):
    assert extension_to_preview_kind(ext) == "link"


def test_every_mapped_kind_is_a_preview_kind():
    assert set(config.EXT_TO_PREVIEW.values()) <= set(config.PREVIEW_KINDS)
    assert config.DEFAULT_PREVIEW_KIND in config.PREVIEW_KINDS


def test_table_is_read_only():
    assert isinstance(config.EXT_TO_PREVIEW, MappingProxyType)
    with pytest.raises(TypeError):
        config.EXT_TO_PREVIEW["exe"] = "link"


def test_custom_table():
    table = {"rst": "text"}
    assert extension_to_preview_kind("rst", table) == "text"
    assert extension_to_preview_kind("pdf", table) == "link"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("report.pdf", "pdf"),
        ("photo.PNG", "png"),
        ("archive.tar.GZ", "gz"),
        ("README", ""),
        ("trailing.", ""),
    ],
)
def test_extension_of(name, expected):
    assert extension_of(name) == expected
