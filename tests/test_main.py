"""
Test suite for the command line front end
"""

import io

from rematch.config import EXIT_MATCH, EXIT_NO_MATCH, EXIT_ERROR
from rematch.main import main


def run(argv, text=""):
    out = io.StringIO()
    code = main(argv, stdin=io.StringIO(text), stdout=out)
    return code, out.getvalue()


def test_prints_matching_lines_from_stdin():
    code, out = run(["^a"], "apple\nbanana\navocado\n")

    assert code == EXIT_MATCH
    assert out == "apple\navocado\n"


def test_no_match_exit_code():
    code, out = run(["nomatch"], "wat\n")

    assert code == EXIT_NO_MATCH
    assert out == ""


def test_trailing_newline_is_not_text():
    """'$' sits before the line break."""

    code, out = run(["og$"], "frog\nfrogs\n")

    assert code == EXIT_MATCH
    assert out == "frog\n"


def test_invert_match():
    code, out = run(["-v", "an*a"], "banana\ncherry\n")

    assert code == EXIT_MATCH
    assert out == "cherry\n"


def test_misplaced_anchor_exit_code(caplog):
    code, out = run(["a$b"], "a$b\n")

    assert code == EXIT_ERROR
    assert out == ""
    assert "bad pattern" in caplog.text


def test_reads_files(tmp_path):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("aaaafrogzzz\nxyz\n", encoding="utf-8")
    second.write_text("frog\n", encoding="utf-8")

    code, out = run(["frog", str(first), str(second)])

    assert code == EXIT_MATCH
    assert out == "aaaafrogzzz\nfrog\n"


def test_missing_file(tmp_path):
    code, _ = run(["a", str(tmp_path / "missing.txt")])

    assert code == EXIT_ERROR


def test_undecodable_file_is_an_error(tmp_path, caplog):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"ok\n\xff\xfe\n")

    code, _ = run(["ok", str(bad)])

    assert code == EXIT_ERROR
    assert "cannot read" in caplog.text


def test_bad_file_does_not_stop_the_rest(tmp_path):
    """Like grep, later files are still searched after a failure."""

    good = tmp_path / "good.txt"
    good.write_text("frog\n", encoding="utf-8")

    code, out = run(["frog", str(tmp_path / "missing.txt"), str(good)])

    assert code == EXIT_ERROR
    assert out == "frog\n"
