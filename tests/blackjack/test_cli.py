import pytest

from simplejack.blackjack.blackjack import create_rules, main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.rounds == 5
    assert args.decks == 3
    assert args.seed is None
    assert not args.autoplay
    assert args.log_file is None
    assert args.log_level == "WARNING"


def test_create_rules():
    rules = create_rules(parse_args(["--rounds", "2", "--decks", "6", "--stand-on-soft-17"]))
    assert rules.num_rounds == 2
    assert rules.num_decks == 6
    assert not rules.dealer_hit_soft_17


def test_autoplay_session(capsys):
    assert main(["--autoplay", "--seed", "11", "--rounds", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("==FINAL HANDS==") == 3
    assert "==SESSION SUMMARY==" in out


def test_interactive_session(mocker, capsys):
    mocker.patch("builtins.input", side_effect=["s"] * 50)
    assert main(["--seed", "1", "--rounds", "2"]) == 0
    assert capsys.readouterr().out.count("==FINAL HANDS==") == 2


def test_input_closed(mocker):
    mocker.patch("builtins.input", side_effect=EOFError)
    assert main(["--seed", "1"]) == 1


def test_invalid_options():
    assert main(["--decks", "0"]) == 2


def test_transcript(tmp_path, mocker):
    log_file = tmp_path / "session.log"
    mocker.patch("builtins.input", side_effect=["bogus", "s", "s"])
    assert main(["--seed", "3", "--rounds", "1", "--log_file", str(log_file)]) == 0

    transcript = log_file.read_text(encoding="utf-8")
    assert "[INPUT] > bogus" in transcript
    assert '"bogus" is not a valid option' in transcript
    assert "==FINAL HANDS==" in transcript


def test_unknown_log_level():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "LOUD"])



def test_transcript_file_unwritable(tmp_path, caplog):
    # a directory cannot be opened for appending
    argv = ["--autoplay", "--seed", "3", "--rounds", "1", "--log_file", str(tmp_path)]

    with caplog.at_level("ERROR"):
        assert main(argv) == 1

    assert "Session failed" in caplog.text


def test_console_failure(mocker, caplog):
    mocker.patch("builtins.input", side_effect=OSError("terminal went away"))

    with caplog.at_level("ERROR"):
        assert main(["--seed", "1"]) == 1

    assert "terminal went away" in caplog.text
