"""Unit tests for identifier derivation"""

import pytest

from image_migrator.identifier import derive_identifier


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("66f2cbaf9c143.png", ("66f2cbaf9c143", "png")),
        ("photo.JPEG", ("photo", "JPEG")),
        ("archive.tar.gz", ("archive.tar", "gz")),
        ("66f2cbaf9c143", ("66f2cbaf9c143", "")),
        ("trailing.", ("trailing", "")),
    ],
)
def test_derive_identifier(file_name, expected) -> None:
    assert derive_identifier(file_name) == expected


def test_identifier_plus_extension_restores_name() -> None:
    """Identifier and file type together give back the stored name"""
    for file_name in ("a.b.c.webp", "x.gif", "noext"):
        identifier, file_type = derive_identifier(file_name)
        rebuilt = f"{identifier}.{file_type}" if file_type else identifier
        assert rebuilt == file_name


def test_derive_identifier_is_deterministic() -> None:
    assert derive_identifier("abc.png") == derive_identifier("abc.png")
