from blackjack.cli.main import main
from blackjack.common.logging_utils import get_logger


def test_main_plays_a_round(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "s")
    assert main() == 0

    out = capsys.readouterr().out
    assert "You decided to stay." in out
    assert "Dealer's score:" in out


def test_main_exits_1_when_input_ends(monkeypatch, capsys):
    def _eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert main() == 1
    assert "No more input, exiting." in capsys.readouterr().out


def test_loggers_live_under_the_package_name():
    assert get_logger("game.session").name == "blackjack.game.session"
