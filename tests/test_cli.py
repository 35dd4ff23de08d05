import pytest

from vecdraw.cli import main


def test_main_prints_greeting(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "hello world"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2