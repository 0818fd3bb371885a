from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from ..analyzer import IdentifierAnalyzer
from ..config import DisplaySettings
from ..core.analysis import Identifier, InvalidIdentifierError
from .output import codepoint_label, styled

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_FLAGGED = 1
EXIT_INVALID = 2


@dataclass(slots=True)
class CheckReport:
    lines: list[str] = field(default_factory=list)
    flagged: int = 0
    invalid: int = 0

    @property
    def exit_code(self) -> int:
        if self.invalid:
            return EXIT_INVALID
        if self.flagged:
            return EXIT_FLAGGED
        return EXIT_CLEAN


def _record(identifier: Identifier, analyzer: IdentifierAnalyzer) -> dict:
    marked = analyzer.mark(identifier)
    return {
        "identifier": str(identifier),
        "bare": str(identifier.bare()),
        "rendered": marked.text,
        "spans": [[span.start, span.end] for span in marked.spans],
        "minority": [codepoint_label(ch) for ch in analyzer.minority(identifier)],
        "has_anomalies": marked.has_anomalies,
    }


def run(
    analyzer: IdentifierAnalyzer,
    identifiers: list[str],
    *,
    display: DisplaySettings | None = None,
    json_output: bool = False,
    plain: bool = False,
) -> CheckReport:
    display = display or DisplaySettings()
    report = CheckReport()
    for text in identifiers:
        try:
            identifier = Identifier.parse(text)
        except InvalidIdentifierError as exc:
            logger.error("Invalid identifier %r: %s", text, exc)
            report.invalid += 1
            continue
        if json_output:
            record = _record(identifier, analyzer)
            if record["has_anomalies"]:
                report.flagged += 1
            report.lines.append(json.dumps(record, ensure_ascii=False))
            continue
        marked = analyzer.mark(identifier)
        if marked.has_anomalies:
            report.flagged += 1
            suspects = ", ".join(
                f"{ch} {codepoint_label(ch)}" for ch in marked.marked_text()
            )
            report.lines.append(
                f"{styled(marked, display, plain=plain)}: MIXED ({suspects})"
            )
        else:
            report.lines.append(f"{styled(marked, display, plain=plain)}: OK")
    return report
