import io

import pytest

from swing_academy import __version__, cli, config
from swing_academy.content import QUESTIONS

CORRECT = ["ABCD"[q.correct] for q in QUESTIONS]


def scripted(*answers):
    it = iter(answers)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch) -> None:
    monkeypatch.setattr(cli, "setup_logging", lambda log_dir: None)


def test_calc_defaults(capsys) -> None:
    assert cli.main(["calc"]) == 0
    out = capsys.readouterr().out
    assert "$200.00" in out
    assert "100 shares" in out
    assert "$5,000.00" in out


def test_calc_with_target(capsys) -> None:
    cli.main(["calc", "--account", "10000", "--risk", "2", "--entry", "50", "--stop", "48",
              "--target", "54"])
    out = capsys.readouterr().out
    assert "2.0:1" in out
    assert "+400.00" in out


def test_calc_entry_equals_stop_warns(capsys) -> None:
    cli.main(["calc", "--entry", "50", "--stop", "50"])
    out = capsys.readouterr().out
    assert "0 shares" in out
    assert "Entry equals stop" in out


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_command_required() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("a", 0), ("B", 1), (" c ", 2), ("4", 3), ("1", 0), ("e", None), ("5", None), ("", None), ("ab", None)],
)
def test_parse_choice(raw, expected) -> None:
    assert cli._parse_choice(raw, 4) == expected


def test_quiz_all_correct() -> None:
    out = io.StringIO()
    quiz = cli.run_quiz(QUESTIONS, read=scripted(*CORRECT), out=out)
    assert quiz is not None
    assert quiz.finished
    assert quiz.score == 10 and quiz.percentage == 100
    text = out.getvalue()
    assert "QUIZ COMPLETE" in text
    assert text.count("Correct!") == 10


def test_quiz_reprompts_on_bad_input() -> None:
    out = io.StringIO()
    quiz = cli.run_quiz(QUESTIONS[:1], read=scripted("z", "9", CORRECT[0]), out=out)
    assert quiz.score == 1
    assert out.getvalue().count("Enter a letter A-D") == 2


def test_quiz_wrong_answer_shows_right_one() -> None:
    out = io.StringIO()
    wrong = "A" if CORRECT[0] != "A" else "B"
    quiz = cli.run_quiz(QUESTIONS[:1], read=scripted(wrong), out=out)
    assert quiz.score == 0
    assert f"Answer: {CORRECT[0]})" in out.getvalue()


def test_quiz_aborts_on_eof() -> None:
    out = io.StringIO()
    assert cli.run_quiz(QUESTIONS, read=scripted(*CORRECT[:3]), out=out) is None
    assert "Quiz aborted" in out.getvalue()


def test_quiz_command_exit_code_on_eof(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["quiz"]) == 1


def test_outline_lists_course() -> None:
    out = io.StringIO()
    cli.print_outline(out=out)
    text = out.getvalue()
    for name in ("Pattern Recognition", "Head and Shoulders", "Pullback Entry", "Power zone"):
        assert name in text


def test_main_logs_under_configured_dir(monkeypatch, capsys) -> None:
    seen = []
    monkeypatch.setattr(cli, "setup_logging", seen.append)
    cli.main(["outline"])
    assert seen == [config.LOG_DIR]
