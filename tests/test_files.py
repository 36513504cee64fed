import pytest

from data_designer_ai_detector.files import (
    UnsupportedFileTypeError,
    format_file_size,
    is_supported_file,
    read_content_file,
)


class TestReadContentFile:
    def test_reads_text_file(self, tmp_path):
        path = tmp_path / "essay.txt"
        path.write_text("Moreover, it utilizes formal language.", encoding="utf-8")
        assert read_content_file(path) == "Moreover, it utilizes formal language."

    def test_reads_source_file_by_string_path(self, tmp_path):
        path = tmp_path / "script.js"
        path.write_text("function main() {}\n", encoding="utf-8")
        assert read_content_file(str(path)).startswith("function main")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "binary.exe"
        path.write_bytes(b"\x00\x01")
        with pytest.raises(UnsupportedFileTypeError):
            read_content_file(path)

    def test_unsupported_is_value_error(self):
        assert issubclass(UnsupportedFileTypeError, ValueError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_content_file(tmp_path / "missing.txt")

    def test_suffix_check_is_case_insensitive(self):
        assert is_supported_file("README.MD")
        assert not is_supported_file("photo.png")


class TestFormatFileSize:
    @pytest.mark.parametrize(
        "size, expected",
        [(0, "0 Bytes"), (512, "512 Bytes"), (1024, "1 KB"), (1536, "1.5 KB"), (1048576, "1 MB")],
    )
    def test_units(self, size, expected):
        assert format_file_size(size) == expected
