import pytest

from nobridge.cli import main


def test_main_prints_whole_deck(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("\033[0m") == 52
    rows = [line for line in out.split("\n") if line]
    assert len(rows) == 4


def test_main_prints_each_suit_thirteen_times(capsys):
    main([])
    out = capsys.readouterr().out
    for symbol in ("♣", "♦", "♥", "♠"):
        assert out.count(symbol) == 13


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2