import array

import pytest

from plog.helpers import AscDump, HexDump, ascdump, hexdump, print_var
from plog.record import Record
from plog.severity import Severity


def test_ascdump_replaces_unprintable_bytes():
    assert str(ascdump(bytes([0x48, 0x65, 0x6C, 0x6C, 0x6F, 0x21, 0xFF]))) == "Hello!."


def test_ascdump_keeps_all_printable_bytes():
    printable = bytes(range(0x20, 0x7F))
    assert str(ascdump(printable)) == printable.decode("ascii")


def test_ascdump_control_bytes_become_dots():
    result = str(ascdump(bytes(range(0x20)) + bytes(range(0x7F, 0x100))))
    assert set(result) == {"."}
    assert len(result) == 0x20 + 0x81


def test_ascdump_accepts_array_buffer():
    values = array.array("h", [0x6548, 0x6C6C, 0x216F, 0, -1])
    result = str(ascdump(values))
    assert len(result) == len(values) * values.itemsize
    assert result == str(ascdump(values.tobytes()))


def test_ascdump_rejects_non_buffer():
    with pytest.raises(TypeError):
        ascdump(42)


def test_hexdump_digits_match_bytes():
    data = bytes(range(20))
    result = str(hexdump(data))
    assert bytes.fromhex(result) == data


def test_hexdump_pins_small_value():
    assert str(hexdump(b"\x00\xff")) == "00 ff"


def test_hexdump_default_groups_of_eight():
    data = bytes(range(24))
    groups = str(hexdump(data)).split("  ")
    assert len(groups) == 3
    assert [bytes.fromhex(g) for g in groups] == [data[0:8], data[8:16], data[16:24]]


def test_hexdump_group_zero_disables_grouping():
    data = bytes(range(24))
    result = str(hexdump(data).group(0))
    assert "  " not in result
    assert result.split(" ") == [f"{b:02x}" for b in data]


def test_hexdump_custom_separators():
    data = bytes(range(12))
    result = str(hexdump(data).group(4).separator("", "|"))
    chunks = result.split("|")
    assert [bytes.fromhex(c) for c in chunks] == [data[0:4], data[4:8], data[8:12]]


def test_hexdump_empty_separators_give_plain_hex():
    data = b"Hello!"
    assert str(hexdump(data).separator("", "")) == data.hex()


def test_hexdump_separator_keeps_group_separator_when_omitted():
    dump = HexDump(bytes(range(16))).separator("-")
    assert dump.group_separator == "  "
    assert str(dump).split("  ")[0].split("-") == [f"{b:02x}" for b in range(8)]


def test_hexdump_negative_group_raises():
    with pytest.raises(ValueError):
        hexdump(b"ab").group(-1)


def test_hexdump_empty_buffer():
    assert str(hexdump(b"")) == ""


def test_hexdump_text_is_utf8():
    assert bytes.fromhex(str(hexdump("котэ").separator(""))) == "котэ".encode("utf-8")


def test_print_var_single_and_many():
    assert print_var(x=10) == "x: 10"
    assert print_var(x=10, y=20, z=30).split(", ") == ["x: 10", "y: 20", "z: 30"]


def test_print_var_formats_containers_like_the_log_stream():
    result = print_var(v=[1, 2, 3])
    assert result == "v: " + str(Record(Severity.INFO) << [1, 2, 3]).split("message")[0][:0] + (Record(Severity.INFO) << [1, 2, 3]).message()


def test_print_var_limits():
    with pytest.raises(TypeError):
        print_var()
    with pytest.raises(TypeError):
        print_var(**{f"v{i}": i for i in range(10)})
    assert len(print_var(**{f"v{i}": i for i in range(9)}).split(", ")) == 9


def test_dumps_stream_into_record():
    record = Record(Severity.INFO) << "arr: " << ascdump(b"Hi") << " " << hexdump(b"Hi")
    assert record.message() == "arr: " + str(AscDump(b"Hi")) + " " + str(HexDump(b"Hi"))