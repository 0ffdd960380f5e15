# tests/test_cli.py - command line smoke checks
import json
import io
import random
import unittest
from unittest.mock import patch

import pytest
from rich.console import Console

from sentence_synth.cli.cli import NO_SENTENCE, InteractiveSession, main
from sentence_synth.core.dump import dump_model
from sentence_synth.core.markov_model import build_from_text
from sentence_synth.utils.model_store import load_model

from conftest import CAT_DOG


def run_cli(args, tmp_path):
    return main(["--log-file", str(tmp_path / "cli.log")] + args)


def test_sentence(corpus_file, tmp_path, capsys):
    assert run_cli(["sentence", str(corpus_file), "3", "--seed", "1"], tmp_path) == 0
    out = capsys.readouterr().out
    assert out.startswith("Random sentence of 3 words: ")
    assert '"The cat sat."' in out or '"The dog ran."' in out


def test_sentence_count(corpus_file, tmp_path, capsys):
    assert run_cli(["sentence", str(corpus_file), "3", "--count", "4"], tmp_path) == 0
    out = capsys.readouterr().out
    assert out.count("Random sentence of 3 words") == 4


def test_sentence_impossible(corpus_file, tmp_path, capsys):
    assert run_cli(["sentence", str(corpus_file), "2", "--count", "3"], tmp_path) == 0
    out = capsys.readouterr().out
    assert out.strip() == NO_SENTENCE


def test_timing_goes_to_log_file(corpus_file, tmp_path):
    run_cli(["sentence", str(corpus_file), "3"], tmp_path)
    assert "build model done" in (tmp_path / "cli.log").read_text(encoding="utf-8")


def test_missing_corpus(tmp_path, capsys):
    assert run_cli(["sentence", str(tmp_path / "nope.txt"), "3"], tmp_path) == 1
    assert "could not read" in capsys.readouterr().err


def test_empty_corpus(tmp_path, capsys):
    p = tmp_path / "empty.txt"
    p.write_text("1234 ###", encoding="utf-8")
    assert run_cli(["model", str(p)], tmp_path) == 1
    assert "no words found" in capsys.readouterr().err


@pytest.mark.parametrize("length", ["0", "-2", "three"])
def test_bad_length_is_usage_error(corpus_file, tmp_path, length):
    with pytest.raises(SystemExit) as exc:
        run_cli(["sentence", str(corpus_file), length], tmp_path)
    assert exc.value.code == 2


def test_model_dump(corpus_file, tmp_path, capsys):
    assert run_cli(["model", str(corpus_file)], tmp_path) == 0
    out = capsys.readouterr().out
    expected = dump_model(build_from_text(CAT_DOG))
    assert [l.rstrip() for l in out.splitlines()] == [l.rstrip() for l in expected.splitlines()]


def test_model_table(corpus_file, tmp_path, capsys):
    assert run_cli(["model", str(corpus_file), "--table"], tmp_path) == 0
    assert "Model (5 words, 2 starters)" in capsys.readouterr().out


def test_save_then_generate_from_saved(corpus_file, tmp_path, capsys):
    saved = tmp_path / "model.json"
    assert run_cli(["model", str(corpus_file), "--save", str(saved)], tmp_path) == 0
    assert len(load_model(saved)) == 5
    capsys.readouterr()

    assert run_cli(["sentence", str(saved), "3", "--seed", "2"], tmp_path) == 0
    assert "Random sentence of 3 words" in capsys.readouterr().out


def test_config_file_supplies_seed(corpus_file, tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"seed": 11}', encoding="utf8")
    outs = []
    for _ in range(2):
        run_cli(["--config", str(cfg), "sentence", str(corpus_file), "3", "--count", "3"], tmp_path)
        outs.append(capsys.readouterr().out)
    assert outs[0] == outs[1]


@pytest.mark.parametrize(
    "payload",
    [
        {"max_word_length": 0},
        {"max_word_length": "twenty"},
        {"default_length": -1},
        {"log_level": "loud"},
        {"seed": [3]},
    ],
)
def test_bad_config_value_exits_cleanly(corpus_file, tmp_path, capsys, payload):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps(payload), encoding="utf8")
    rc = run_cli(["--config", str(cfg), "sentence", str(corpus_file), "3"], tmp_path)
    assert rc == 1
    captured = capsys.readouterr()
    assert "bad config value for" in captured.err
    assert captured.out == ""


def test_config_string_numbers_are_accepted(corpus_file, tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"max_word_length": "20", "log_level": "error"}), encoding="utf8")
    rc = run_cli(["--config", str(cfg), "sentence", str(corpus_file), "3"], tmp_path)
    assert rc == 0
    assert "Random sentence of 3 words" in capsys.readouterr().out


def test_interactive_session():
    model = build_from_text(CAT_DOG)
    buf = io.StringIO()
    out = Console(file=buf, width=120)
    stdin = io.StringIO("3\n2\n/stats\n/bogus\nabc\n/quit\n")

    session = InteractiveSession(model, random.Random(0), out=out, stream=stdin)
    session.run()

    text = buf.getvalue()
    assert "The cat sat." in text or "The dog ran." in text
    assert NO_SENTENCE in text
    assert "Unknown command" in text
    assert "Bad length" in text
    assert "Sentences generated" in text
    assert session.generated == 1
    assert session.impossible == 1
    assert not session.running


def test_interactive_output_is_not_wrapped():
    model = build_from_text("The quick brown fox jumps over the lazy dog.")
    buf = io.StringIO()
    out = Console(file=buf, width=20)
    stdin = io.StringIO("9\n4\n/quit\n")

    InteractiveSession(model, random.Random(0), out=out, stream=stdin).run()

    # input is not echoed, so each answer follows its prompt on the same line
    lines = buf.getvalue().splitlines()
    assert any(l.endswith(": The quick brown fox jumps over the lazy dog.") for l in lines)
    assert any(l.endswith(": " + NO_SENTENCE) for l in lines)


class MainWiringTests(unittest.TestCase):
    @patch("sentence_synth.cli.cli.build_from_file")
    def test_max_word_length_reaches_builder(self, mock_build):
        mock_build.return_value = build_from_text(CAT_DOG)
        rc = main(["--log-file", "/dev/null", "--max-word-length", "7", "model", "corpus.txt"])
        self.assertEqual(rc, 0)
        mock_build.assert_called_once()
        path, cfg = mock_build.call_args[0]
        self.assertEqual(path, "corpus.txt")
        self.assertEqual(cfg.max_word_length, 7)

    @patch("sentence_synth.cli.cli.InteractiveSession")
    @patch("sentence_synth.cli.cli.build_from_file")
    def test_interactive_uses_default_length(self, mock_build, MockSession):
        mock_build.return_value = build_from_text(CAT_DOG)
        rc = main(["--log-file", "/dev/null", "interactive", "corpus.txt", "--seed", "3"])
        self.assertEqual(rc, 0)
        MockSession.return_value.run.assert_called_once()
        self.assertEqual(MockSession.call_args[1]["default_length"], 8)


if __name__ == "__main__":
    unittest.main()
