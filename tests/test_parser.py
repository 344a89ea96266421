import io

import pytest

from battlesim.commands import CreateMap, March, SpawnHunter, SpawnSwordsman
from battlesim.parser import UINT32_MAX, CommandParser


def _collecting_parser():
    received = []
    parser = CommandParser(io.StringIO())
    parser.add(CreateMap, received.append)
    parser.add(SpawnSwordsman, received.append)
    parser.add(SpawnHunter, received.append)
    parser.add(March, received.append)
    return parser, received


def test_add_announces_command():
    out = io.StringIO()
    CommandParser(out).add(CreateMap, lambda command: None)
    assert out.getvalue() == "Command added CREATE_MAP\n"


def test_add_returns_parser_for_chaining():
    parser = CommandParser(io.StringIO())
    assert parser.add(CreateMap, lambda command: None) is parser


def test_duplicate_command_rejected():
    parser = CommandParser(io.StringIO())
    parser.add(March, lambda command: None)
    with pytest.raises(ValueError, match="Command already exists: MARCH"):
        parser.add(March, lambda command: None)


def test_parse_dispatches_commands_in_order():
    parser, received = _collecting_parser()
    parser.parse(
        [
            "CREATE_MAP 10 12\n",
            "SPAWN_SWORDSMAN 1 0 0 5 2\n",
            "SPAWN_HUNTER 2 9 0 10 5 1 4\n",
            "MARCH 1 9 0\n",
        ]
    )
    assert received == [
        CreateMap(10, 12),
        SpawnSwordsman(1, 0, 0, 5, 2),
        SpawnHunter(2, 9, 0, 10, 5, 1, 4),
        March(1, 9, 0),
    ]


def test_comments_and_blank_lines_skipped():
    parser, received = _collecting_parser()
    parser.parse("// a comment\n\n   \nCREATE_MAP 3 4\n// UNKNOWN 1\n")
    assert received == [CreateMap(3, 4)]


def test_unknown_command_raises():
    parser, _ = _collecting_parser()
    with pytest.raises(ValueError, match="Unknown command: FOO"):
        parser.parse(["FOO 1 2"])


def test_missing_fields_keep_defaults():
    parser, received = _collecting_parser()
    parser.parse(["MARCH 7"])
    assert received == [March(7, 0, 0)]


def test_invalid_field_stops_reading():
    parser, received = _collecting_parser()
    parser.parse(["SPAWN_SWORDSMAN 1 x 3 4 5"])
    assert received == [SpawnSwordsman(1, 0, 0, 0, 0)]


def test_number_prefix_is_read_and_rest_fails():
    parser, received = _collecting_parser()
    parser.parse(["CREATE_MAP 12abc 7"])
    assert received == [CreateMap(12, 0)]


def test_overflow_saturates_and_stops():
    parser, received = _collecting_parser()
    parser.parse([f"CREATE_MAP {UINT32_MAX + 1} 7"])
    assert received == [CreateMap(UINT32_MAX, 0)]


def test_parse_reads_file_like_object():
    parser, received = _collecting_parser()
    parser.parse(io.StringIO("CREATE_MAP 5 6\nMARCH 1 2 3\n"))
    assert received == [CreateMap(5, 6), March(1, 2, 3)]