import os

from plog.converters import NativeEOLConverter, UTF8Converter

BOM = b"\xef\xbb\xbf"


def test_utf8_convert_encodes_text():
    text = "Cat - котэ"
    assert UTF8Converter().convert(text) == text.encode("utf-8")


def test_utf8_header_of_empty_text_is_bom():
    assert UTF8Converter().header("") == BOM


def test_utf8_header_prefixes_converted_text():
    converter = UTF8Converter()
    text = "Date;Time;Severity;TID;This;Function;Message\n"
    result = converter.header(text)
    assert result.startswith(BOM)
    assert result[len(BOM):] == converter.convert(text)


def test_native_eol_with_crlf_inserts_carriage_returns():
    converter = NativeEOLConverter(eol="\r\n")
    assert converter.convert("a\nb\n") == b"a\r\nb\r\n"


def test_native_eol_with_lf_matches_utf8():
    text = "This\nis\na\nmultiline\nmessage!"
    assert NativeEOLConverter(eol="\n").convert(text) == UTF8Converter().convert(text)


def test_native_eol_default_uses_platform_line_separator():
    converter = NativeEOLConverter()
    assert converter.eol == os.linesep
    assert converter.convert("x\ny").decode("utf-8").split(os.linesep) == ["x", "y"]


def test_native_eol_header_keeps_bom_and_fixes_endings():
    result = NativeEOLConverter(eol="\r\n").header("head\n")
    assert result.startswith(BOM)
    assert result[len(BOM):].decode("utf-8").endswith("\r\n")
    assert result.count(b"\r\n") == 1


def test_native_eol_delegates_to_given_converter():
    class Upper:
        def header(self, text):
            return b"H:" + text.upper().encode()

        def convert(self, text):
            return text.upper().encode()

    converter = NativeEOLConverter(Upper(), eol="\r\n")
    assert converter.convert("ab\n") == "AB\r\n".encode()
    assert converter.header("h\n").startswith(b"H:")