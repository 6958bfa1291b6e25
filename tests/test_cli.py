from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from tagsieve.__main__ import build_config, main, parse_args


def _run(argv: list[str], stdin: str = "") -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    with mock.patch("sys.stdin", io.StringIO(stdin)), redirect_stdout(out), redirect_stderr(err):
        status = main(argv)
    return status, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_parse_args_splits_name_lists(self) -> None:
        args = parse_args(["--tags", "p, a,", "--supplement-attributes", "data-x"])
        assert args.tags == ["p", "a"]
        assert args.supplement_attributes == ["data-x"]
        assert args.path == "-"

    def test_build_config(self) -> None:
        config = build_config(parse_args(["--tags", "P", "--document", "--strict"]))
        assert config.tags == frozenset({"p"})
        assert config.document is True
        assert config.unsafe_handling == "raise"

    def test_supplement_scriptable_extends_defaults(self) -> None:
        config = build_config(parse_args(["--supplement-scriptable", "Ping"]))
        assert "ping" in config.scriptable_attributes
        assert "href" in config.scriptable_attributes

        status, out, _ = _run(
            ["--tags", "a", "--attributes", "ping", "--supplement-scriptable", "ping"],
            '<a ping="javascript:x">l</a>',
        )
        assert status == 0
        assert out == "<a>l</a>"

    def test_sanitizes_stdin(self) -> None:
        status, out, err = _run(["--tags", "p"], '<p onclick="x">hi</p><script>y</script>')
        assert status == 0
        assert out == "<p>hi</p>"
        assert err == ""

    def test_reads_file_argument(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "in.html"
            path.write_text('<a href="javascript:x" title="t">l</a>', encoding="utf-8")
            status, out, _ = _run([str(path)])
        assert status == 0
        assert out == '<a title="t">l</a>'

    def test_report_prints_findings(self) -> None:
        status, out, err = _run(["--tags", "p", "--report"], "<p>x</p><script>y</script>")
        assert status == 0
        assert out == "<p>x</p>"
        assert "Unsafe tag 'script' (not allowed)" in err

    def test_strict_fails_on_finding(self) -> None:
        status, out, err = _run(["--tags", "p", "--strict"], "<p>x</p><script>y</script>")
        assert status == 1
        assert out == ""
        assert err.startswith("Unsafe input: Unsafe tag 'script'")


if __name__ == "__main__":
    unittest.main()
