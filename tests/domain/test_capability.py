"""Tests for load()/dump() entry points and the Decodable protocol."""

from __future__ import annotations

import pytest

from loadtok.domain.capability import Decodable, describe, dump, load
from loadtok.domain.errors import EndOfStream, ParseError
from loadtok.domain.record import record
from loadtok.domain.samples import COMPANY, EMPLOYEE, Company, Employee
from loadtok.domain.scalars import FLOAT, INT, TEXT
from loadtok.domain.sequence import sequence_of
from loadtok.domain.stream import TokenStream


class TestLoadScenarios:
    def test_integer(self) -> None:
        assert load("33", INT) == 33

    def test_text(self) -> None:
        assert load("abc", TEXT) == "abc"

    def test_list_of_text(self) -> None:
        assert load("3/apple/banana/cherry", sequence_of(TEXT)) == ["apple", "banana", "cherry"]

    def test_company(self) -> None:
        company = load("CatWorld/3/tama/5/mike/6/kuro/7", COMPANY)
        assert company == Company(
            name="CatWorld",
            employees=[Employee("tama", 5), Employee("mike", 6), Employee("kuro", 7)],
        )

    def test_non_integer_for_int(self) -> None:
        with pytest.raises(ParseError):
            load("abc", INT)

    def test_short_sequence(self) -> None:
        with pytest.raises(EndOfStream):
            load("3/apple/banana", sequence_of(TEXT))


class TestLoadFromStream:
    def test_continues_open_stream(self) -> None:
        stream = TokenStream.from_string("taro/3/hanako/4")
        assert load(stream, EMPLOYEE) == Employee("taro", 3)
        assert load(stream, EMPLOYEE) == Employee("hanako", 4)
        assert stream.exhausted

    def test_delimiter_ignored_for_streams(self) -> None:
        stream = TokenStream(["a|b"])
        assert load(stream, TEXT, delimiter="|") == "a|b"

    def test_custom_delimiter_for_strings(self) -> None:
        assert load("2|x|y", sequence_of(TEXT), delimiter="|") == ["x", "y"]


class TestDump:
    def test_scalar(self) -> None:
        assert dump(33, INT) == "33"

    def test_company(self) -> None:
        company = Company("CatWorld", [Employee("tama", 5), Employee("mike", 6)])
        assert dump(company, COMPANY) == "CatWorld/2/tama/5/mike/6"

    def test_custom_delimiter(self) -> None:
        assert dump(["a", "b"], sequence_of(TEXT), delimiter="|") == "2|a|b"

    def test_delimiter_inside_text_rejected(self) -> None:
        with pytest.raises(ValueError, match="contains the delimiter"):
            dump("a/b", TEXT)

    def test_delimiter_only_checked_against_chosen_one(self) -> None:
        assert dump("a/b", TEXT, delimiter="|") == "a/b"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "value,capability",
        [
            (-42, INT),
            ("hello", TEXT),
            (0.125, FLOAT),
            ([], sequence_of(INT)),
            ([["a"], [], ["b", "c"]], sequence_of(sequence_of(TEXT))),
            (Employee("taro", 3), EMPLOYEE),
            (
                Company("CatWorld", [Employee("tama", 5), Employee("", 0)]),
                COMPANY,
            ),
            (
                [Company("A", []), Company("B", [Employee("x", -1)])],
                sequence_of(COMPANY),
            ),
        ],
    )
    def test_load_dump_round_trip(self, value: object, capability: Decodable[object]) -> None:
        assert load(dump(value, capability), capability) == value

    def test_round_trip_consumes_everything(self) -> None:
        company = Company("CatWorld", [Employee("tama", 5)])
        stream = TokenStream.from_string(dump(company, COMPANY))
        COMPANY.decode(stream)
        assert stream.exhausted


class TestProtocol:
    def test_builtin_capabilities_satisfy_protocol(self) -> None:
        for cap in (INT, TEXT, FLOAT, sequence_of(INT), EMPLOYEE):
            assert isinstance(cap, Decodable)

    def test_plain_object_does_not(self) -> None:
        assert not isinstance(object(), Decodable)

    def test_describe(self) -> None:
        assert describe(sequence_of(EMPLOYEE)) == "list[Employee]"
        assert describe(record(dict)) == "dict"

    def test_describe_falls_back_to_class_name(self) -> None:
        class Anonymous:
            pass

        assert describe(Anonymous()) == "Anonymous"
