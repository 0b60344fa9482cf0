"""Unit tests for field value wrappers and operation tags."""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from textformatter.fields import fmt, hex_bytes, money
from textformatter.formatter import TextFormatter
from textformatter.optag import OpTag, base36
from textformatter.record import Record
from textformatter.values import ValueKind, classify

MakeRecord = Callable[..., Record]


class TestFieldWrappers:
    def test_fmt(self) -> None:
        value = fmt("%s=%d", "retries", 3)
        assert str(value) == "retries=3"
        assert classify(value) is ValueKind.TEXTUAL

    def test_hex_bytes(self) -> None:
        assert str(hex_bytes(b"\x0a\xff\x10")) == "[0A FF 10]"
        assert str(hex_bytes(b"")) == "[]"
        assert str(hex_bytes(bytearray(b"\x01"))) == "[01]"

    def test_money(self) -> None:
        assert str(money(125000)) == "125000"

    def test_money_rejects_fractional_amount(self) -> None:
        with pytest.raises(TypeError):
            money(12.5)

    def test_wrappers_render_verbatim(
        self, formatter: TextFormatter, make_record: MakeRecord
    ) -> None:
        record = make_record({"payload": hex_bytes(b"\x01\x02"), "amount": money(42), "__p": "pay"})
        out = formatter.format(record)
        assert out.endswith(b"pay: TeSt (amount=42 payload=[01 02])\n")


class TestOpTag:
    def test_base36(self) -> None:
        assert base36(0) == "0"
        assert base36(35) == "z"
        assert base36(36) == "10"
        assert base36(-71) == "-1z"

    def test_root_tag(self) -> None:
        tag = OpTag.new()
        assert str(tag) == base36(tag.time_ns)
        assert tag.time.tzinfo == timezone.utc

    def test_child_tag_extends_parent(self) -> None:
        parent = OpTag(1_000, "rc")
        child = OpTag.new(parent)
        head, tail = str(child).split(" ")
        assert head == "rc"
        assert int(tail, 36) == child.time_ns - 1_000

    def test_time(self) -> None:
        tag = OpTag(1_700_000_000_000_000_000, "x")
        assert tag.time == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_as_tag_field(self, formatter: TextFormatter, make_record: MakeRecord) -> None:
        out = formatter.format(make_record({"__t": OpTag(0, "abc")}))
        assert b" DEBUG :abc: __p<missing>: TeSt\n" in out
