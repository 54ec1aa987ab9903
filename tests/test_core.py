import io

import pytest

from fileman.__main__ import main, parse_args
from fileman.ui import ConsoleUI


async def test_compress_and_decompress_commands(fm, path_work):
    (path_work / "my notes.txt").write_bytes(b"hello")
    (path_work / "out").mkdir()

    await fm.execute('compress "my notes.txt" out')
    await fm.execute("decompress 'out/my notes.txt.zst'")

    assert (path_work / "out" / "my notes.txt").read_bytes() == b"hello"


async def test_cd_and_up(fm, ui, path_work):
    (path_work / "inner").mkdir()

    await fm.execute("cd inner")
    assert fm.current_dir == str(path_work / "inner")

    await fm.execute("up")
    assert fm.current_dir == str(path_work)


async def test_cd_missing_directory(fm, ui, path_work):
    await fm.execute("cd nowhere")

    assert fm.current_dir == str(path_work)
    assert ui.messages == ["failed", f"No such directory {path_work / 'nowhere'}"]


async def test_up_stops_at_root(fm):
    fm.current_dir = "/"

    await fm.execute("up")

    assert fm.current_dir == "/"


async def test_unknown_command(fm, ui):
    await fm.execute("rm -rf /")

    assert ui.messages[:2] == ["invalid", "Unknown command rm"]
    assert "compress" in ui.messages[2]


async def test_wrong_argument_count(fm, ui):
    await fm.execute("compress")
    await fm.execute("up there")

    assert ui.messages == [
        "invalid", "Wrong number of arguments for compress",
        "invalid", "Wrong number of arguments for up",
    ]


async def test_unbalanced_quotes(fm, ui):
    await fm.execute('compress "broken')

    assert ui.messages == ["invalid"]


async def test_blank_line_is_ignored(fm, ui):
    await fm.execute("   ")

    assert ui.messages == []


async def test_main_loop_runs_until_exit(fm, ui, path_work):
    (path_work / "a.txt").write_bytes(b"abc")

    await fm.main(["compress a.txt", ".exit", "compress a.txt"])

    assert not fm.running
    assert ui.messages[0] == "greeting tester"
    assert ui.messages[-1] == "farewell tester"
    assert (path_work / "a.txt.zst").exists()
    assert not any("already exists" in m for m in ui.messages)


async def test_main_loop_exits_at_end_of_input(fm, ui):
    await fm.main([])

    assert ui.messages[-1] == "farewell tester"


def test_console_ui_translates_markers():
    out = io.StringIO()
    console = ConsoleUI(out)

    console.report("failed")
    console.report("invalid")
    console.report("File /x", " already exists")

    assert out.getvalue().splitlines() == [
        "Operation failed",
        "Invalid input",
        "File /x already exists",
    ]


def test_cli_rejects_missing_start_dir(tmp_path, capsys):
    assert main(["--dir", str(tmp_path / "nope")]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_cli_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit):
        main(["--log-level", "loud"])
    assert "invalid choice" in capsys.readouterr().err


def test_cli_accepts_lowercase_log_level():
    assert parse_args(["--log-level", "info"]).log_level == "INFO"
