"""Tests for infrastructure/archive_reader.py."""

from __future__ import annotations

import lzma
import zipfile
import zlib
from typing import TYPE_CHECKING

import pytest

from class2greylist.domain.exceptions import ArchiveError, ClassFormatError
from class2greylist.infrastructure.archive_reader import ArchiveReader
from tests.factories import ClassFileBuilder, make_jar, make_status, set_compression_method

if TYPE_CHECKING:
    from pathlib import Path


class TestArchiveReaderOpen:
    def test_missing_file(self, tmp_path: Path) -> None:
        status, _ = make_status()
        with pytest.raises(ArchiveError, match="file not found"):
            ArchiveReader(tmp_path / "missing.jar", status)

    def test_not_a_zip(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.jar"
        path.write_bytes(b"not a zip file")
        status, _ = make_status()

        with pytest.raises(ArchiveError, match="not a valid jar file") as exc_info:
            ArchiveReader(path, status)

        assert exc_info.value.path == path

    def test_directory(self, tmp_path: Path) -> None:
        status, _ = make_status()
        with pytest.raises(ArchiveError):
            ArchiveReader(tmp_path, status)


class TestArchiveReaderClasses:
    def test_reads_classes_in_archive_order(self, tmp_path: Path) -> None:
        jar = make_jar(
            tmp_path / "classes.jar",
            [ClassFileBuilder("a/First").build(), ClassFileBuilder("a/Second").build()],
        )
        status, _ = make_status()

        with ArchiveReader(jar, status) as reader:
            names = [parsed.name for parsed in reader.classes()]

        assert names == ["a/First", "a/Second"]

    def test_skips_non_class_entries(self, tmp_path: Path) -> None:
        jar = make_jar(
            tmp_path / "classes.jar",
            [ClassFileBuilder("a/Only").build()],
            extra={"res/values.xml": b"<resources/>", "a/": b""},
        )
        status, _ = make_status()

        with ArchiveReader(jar, status) as reader:
            assert reader.class_entries() == ["a/Only.class"]
            assert [p.name for p in reader.classes()] == ["a/Only"]

    def test_empty_archive(self, tmp_path: Path) -> None:
        jar = make_jar(tmp_path / "empty.jar", [])
        status, _ = make_status()

        with ArchiveReader(jar, status) as reader:
            assert list(reader.classes()) == []

    def test_malformed_class_raises_archive_error(self, tmp_path: Path) -> None:
        jar = make_jar(
            tmp_path / "broken.jar",
            [ClassFileBuilder("a/Good").build()],
            extra={"a/Broken.class": b"\xca\xfe\xba\xbe"},
        )
        status, _ = make_status()

        with ArchiveReader(jar, status) as reader:
            classes = reader.classes()
            assert next(classes).name == "a/Good"
            with pytest.raises(ArchiveError, match="a/Broken.class") as exc_info:
                next(classes)

        assert isinstance(exc_info.value.__cause__, ClassFormatError)

    def test_debug_lists_entries(self, tmp_path: Path) -> None:
        jar = make_jar(tmp_path / "classes.jar", [ClassFileBuilder("a/B").build()])
        status, output = make_status(debug=True)

        with ArchiveReader(jar, status) as reader:
            list(reader.classes())

        assert "Reading a/B.class" in output.getvalue()

    def test_close_closes_zip(self, tmp_path: Path) -> None:
        jar = make_jar(tmp_path / "classes.jar", [ClassFileBuilder("a/B").build()])
        status, _ = make_status()

        reader = ArchiveReader(jar, status)
        reader.close()

        with pytest.raises(ValueError):
            list(reader.classes())

    def test_stored_entries(self, tmp_path: Path) -> None:
        path = tmp_path / "stored.jar"
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as jar:
            jar.writestr("a/B.class", ClassFileBuilder("a/B").build())
        status, _ = make_status()

        with ArchiveReader(path, status) as reader:
            assert [p.name for p in reader.classes()] == ["a/B"]


class TestArchiveReaderEntryErrors:
    """Every failure reading an entry surfaces as ArchiveError."""

    def test_unsupported_compression(self, tmp_path: Path) -> None:
        jar = make_jar(
            tmp_path / "deflate64.jar",
            [ClassFileBuilder("a/B").build()],
            compression=zipfile.ZIP_STORED,
        )
        set_compression_method(jar, 9)
        status, _ = make_status()

        with ArchiveReader(jar, status) as reader:
            with pytest.raises(ArchiveError, match="cannot read a/B.class") as exc_info:
                list(reader.classes())

        assert isinstance(exc_info.value.__cause__, NotImplementedError)

    @pytest.mark.parametrize(
        "error",
        [
            RuntimeError("File a/B.class is encrypted, password required for extraction"),
            EOFError(),
            zlib.error("invalid stored block lengths"),
            lzma.LZMAError("Corrupt input data"),
            zipfile.BadZipFile("Bad CRC-32 for file 'a/B.class'"),
        ],
        ids=["encrypted", "truncated", "zlib", "lzma", "crc"],
    )
    def test_read_failures(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, error: Exception
    ) -> None:
        jar = make_jar(tmp_path / "classes.jar", [ClassFileBuilder("a/B").build()])
        status, _ = make_status()

        def fail(*args: object, **kwargs: object) -> bytes:
            raise error

        with ArchiveReader(jar, status) as reader:
            monkeypatch.setattr(zipfile.ZipFile, "read", fail)
            with pytest.raises(ArchiveError, match="cannot read a/B.class") as exc_info:
                list(reader.classes())

        assert exc_info.value.__cause__ is error
