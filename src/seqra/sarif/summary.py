# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Finding and rule counts for a SARIF report."""

from __future__ import annotations

from pydantic import BaseModel, Field

from seqra.core.constants import DEFAULT_LEVEL, Level
from seqra.models.sarif import SarifReport


class Summary(BaseModel):
    total_findings: int = 0
    total_rules_executed: int = 0
    total_rules_triggered: int = 0
    findings_by_level: dict[str, int] = Field(default_factory=dict)

    def count_for(self, level: Level | str) -> int:
        return self.findings_by_level.get(level, 0)


def generate_summary(report: SarifReport) -> Summary:
    """Count findings per level and distinct executed/triggered rules.

    Results without a level are set to ``note`` in place.
    """
    summary = Summary()
    rules_executed: set[str] = set()
    rules_triggered: set[str] = set()

    for run in report.runs:
        for rule in run.tool.driver.rules:
            rules_executed.add(rule.id)

        for result in run.results:
            if result.ruleId is not None:
                rules_triggered.add(result.ruleId)
            if not result.level:
                result.level = DEFAULT_LEVEL.value
            summary.findings_by_level[result.level] = (
                summary.findings_by_level.get(result.level, 0) + 1
            )
            summary.total_findings += 1

    summary.total_rules_executed = len(rules_executed)
    summary.total_rules_triggered = len(rules_triggered)
    return summary
