import pytest

from battlesim.cli import main

HEADER = (
    "Commands:\n"
    "Command added CREATE_MAP\n"
    "Command added SPAWN_SWORDSMAN\n"
    "Command added SPAWN_HUNTER\n"
    "Command added MARCH\n"
    "\n"
)


def write(tmp_path, text):
    path = tmp_path / "scenario.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_no_arguments_is_an_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert str(info.value) == "Error: No file specified in command line argument"


def test_too_many_arguments_is_an_error(tmp_path):
    path = write(tmp_path, "")
    with pytest.raises(SystemExit) as info:
        main([path, path])
    assert str(info.value) == "Error: No file specified in command line argument"


def test_missing_file_is_an_error(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(SystemExit) as info:
        main([missing])
    assert str(info.value) == f"Error: File not found - {missing}"


def test_scenario_plays_to_the_end(tmp_path, capsys):
    path = write(
        tmp_path,
        "// a short fight\n"
        "CREATE_MAP 5 5\n"
        "\n"
        "SPAWN_SWORDSMAN 1 0 0 10 5\n"
        "SPAWN_HUNTER 2 1 0 10 5 5 2\n",
    )
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert out.startswith(HEADER)
    lines = out.splitlines()
    assert "[1] MAP_CREATED width=5 height=5 " in lines
    assert "[1] UNIT_SPAWNED unitId=1 unitType=Swordsman x=0 y=0 " in lines
    assert "[1] UNIT_SPAWNED unitId=2 unitType=Hunter x=1 y=0 " in lines
    assert sum("UNIT_DIED" in line for line in lines) == 1


def test_march_command_is_logged(tmp_path, capsys):
    path = write(
        tmp_path,
        "CREATE_MAP 4 1\nSPAWN_SWORDSMAN 1 0 0 10 5\nMARCH 1 3 0\n",
    )
    main([path])
    lines = capsys.readouterr().out.splitlines()
    assert "[1] MARCH_STARTED unitId=1 x=0 y=0 targetX=3 targetY=0 " in lines


def test_unknown_command_raises(tmp_path):
    path = write(tmp_path, "CREATE_MAP 4 4\nFOO 1 2\n")
    with pytest.raises(ValueError, match="Unknown command: FOO"):
        main([path])