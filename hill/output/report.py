"""
Hill Report Generator
======================

Generates JSON reports from Hill cipher results. The report wraps the
pydantic result (key setup, cipher trace, or round trip) with metadata so
it can be consumed by scripts and grading tools.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Union

from hill.core.models import CipherTrace, KeyDerivation, RoundTripResult

HillResult = Union[KeyDerivation, CipherTrace, RoundTripResult]

_RESULT_KINDS: dict[type, str] = {
    KeyDerivation: "key_setup",
    CipherTrace: "cipher_trace",
    RoundTripResult: "round_trip",
}


class HillReportGenerator:
    """Builds JSON reports from Hill results.

    Usage::

        generator = HillReportGenerator()
        generator.generate_json(trace, Path("report.json"))
        print(generator.to_json(trace))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def build(self, result: HillResult) -> dict[str, Any]:
        """Return the report as a plain dictionary."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "hill",
                "kind": _RESULT_KINDS[type(result)],
                "version": self.version,
            },
            "result": result.model_dump(mode="json"),
        }

    def to_json(self, result: HillResult) -> str:
        return json.dumps(self.build(result), indent=2, ensure_ascii=False, default=str)

    def generate_json(self, result: HillResult, output_path: Path) -> Path:
        """Write the JSON report to *output_path*, creating parent directories.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path
