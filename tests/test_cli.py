import io
import json
import logging
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from scriptspan.analyzer import IdentifierAnalyzer
from scriptspan.cli import main
from scriptspan.commands import blocks as cmd_blocks
from scriptspan.commands import check as cmd_check
from scriptspan.commands.output import highlight
from scriptspan.core.analysis import MarkedIdentifier, Span

CYRILLIC_A = "а"


class TestHighlight(unittest.TestCase):
    def test_wraps_each_span(self) -> None:
        marked = MarkedIdentifier(text="pаypаl@x", spans=(Span(1, 2), Span(4, 5)))
        self.assertEqual(highlight(marked, "<", ">"), "p<а>yp<а>l@x")

    def test_no_spans(self) -> None:
        self.assertEqual(highlight(MarkedIdentifier(text="a@x"), "<", ">"), "a@x")


class TestCheckCommand(unittest.TestCase):
    def test_plain_output(self) -> None:
        report = cmd_check.run(
            IdentifierAnalyzer(),
            [f"p{CYRILLIC_A}ypal@example.com", "paypal@example.com"],
            plain=True,
        )
        self.assertEqual(
            report.lines,
            [
                f"p[[{CYRILLIC_A}]]ypal@example.com: MIXED ({CYRILLIC_A} U+0430)",
                "paypal@example.com: OK",
            ],
        )
        self.assertEqual(report.exit_code, cmd_check.EXIT_FLAGGED)

    def test_json_output(self) -> None:
        report = cmd_check.run(
            IdentifierAnalyzer(), [f"p{CYRILLIC_A}ypal@example.com/phone"], json_output=True
        )
        record = json.loads(report.lines[0])
        self.assertEqual(record["rendered"], f"p{CYRILLIC_A}ypal@example.com/phone")
        self.assertEqual(record["bare"], f"p{CYRILLIC_A}ypal@example.com")
        self.assertEqual(record["spans"], [[1, 2]])
        self.assertEqual(record["minority"], ["U+0430"])
        self.assertTrue(record["has_anomalies"])

    def test_invalid_identifier(self) -> None:
        with self.assertLogs("scriptspan.commands.check", level=logging.ERROR):
            report = cmd_check.run(IdentifierAnalyzer(), ["alice@"])
        self.assertEqual(report.invalid, 1)
        self.assertEqual(report.exit_code, cmd_check.EXIT_INVALID)

    def test_clean_exit_code(self) -> None:
        report = cmd_check.run(IdentifierAnalyzer(), ["example.com/phone"])
        self.assertEqual(report.lines, ["example.com/phone: OK"])
        self.assertEqual(report.exit_code, cmd_check.EXIT_CLEAN)


class TestBlocksCommand(unittest.TestCase):
    def test_lists_folded_blocks_and_majority(self) -> None:
        lines = cmd_blocks.run(IdentifierAnalyzer(), f"é{CYRILLIC_A}")
        self.assertIn("U+00E9", lines[0])
        self.assertIn("LATIN_1_SUPPLEMENT -> BASIC_LATIN", lines[0])
        self.assertIn("[U+0080..U+00FF]", lines[0])
        self.assertIn("CYRILLIC", lines[1])
        self.assertIn("[U+0400..U+04FF]", lines[1])
        self.assertEqual(lines[-1], "Majority: BASIC_LATIN (BASIC_LATIN=1, CYRILLIC=1)")

    def test_empty_text(self) -> None:
        self.assertEqual(cmd_blocks.run(IdentifierAnalyzer(), ""), [])

    def test_list_blocks(self) -> None:
        lines = cmd_blocks.list_blocks()
        self.assertEqual(lines[0].split(), ["U+0000..U+007F", "BASIC_LATIN"])
        self.assertIn("CYRILLIC", [line.split()[-1] for line in lines])


class TestMain(unittest.TestCase):
    def _run(self, argv: list[str]) -> tuple[int, str]:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main(argv)
        return code, buffer.getvalue()

    def test_check_flags_mixed_identifier(self) -> None:
        code, out = self._run(["check", "--plain", f"p{CYRILLIC_A}ypal@example.com"])
        self.assertEqual(code, 1)
        self.assertIn(f"p[[{CYRILLIC_A}]]ypal@example.com: MIXED", out)

    def test_check_clean_identifier(self) -> None:
        code, out = self._run(["check", "paypal@example.com"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "paypal@example.com: OK")

    def test_check_uses_configured_highlight(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = Path(tmpdir) / "scriptspan.yaml"
            config.write_text(
                "display:\n  highlight: '<'\n  reset: '>'\n", encoding="utf-8"
            )
            code, out = self._run(
                ["--config", str(config), "check", f"p{CYRILLIC_A}ypal@example.com"]
            )
        self.assertEqual(code, 1)
        self.assertIn(f"p<{CYRILLIC_A}>ypal@example.com", out)

    def test_check_rejects_dot_only_domain(self) -> None:
        with self.assertLogs("scriptspan.commands.check", level=logging.ERROR):
            code, out = self._run(["check", "alice@."])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")

    def test_blocks_list(self) -> None:
        code, out = self._run(["blocks", "--list"])
        self.assertEqual(code, 0)
        self.assertIn("U+0400..U+04FF", out)

    def test_blocks(self) -> None:
        code, out = self._run(["blocks", "ab"])
        self.assertEqual(code, 0)
        self.assertIn("Majority: BASIC_LATIN (BASIC_LATIN=2)", out)


if __name__ == "__main__":
    unittest.main()
