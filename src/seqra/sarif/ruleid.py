# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Semgrep-compatible rule identifiers.

The analyzer names rules ``<path/to/rules.yml>:<id>``. Semgrep names the same
rule ``path.to.<id>``: the directories of the rule file joined by dots, the
file name itself dropped.
"""

from __future__ import annotations

import logging
import os
import re

from seqra.models.sarif import SarifReport

logger = logging.getLogger("seqra.sarif.ruleid")

_WHITESPACE = re.compile(r"\s+")


def rule_id_path_start(user_rules_path: str, cwd: str | None = None) -> str:
    """Return the ruleset argument relative to the working directory."""
    if not user_rules_path:
        return ""
    if cwd is None:
        cwd = os.getcwd()
    rule_start = user_rules_path.removeprefix(cwd)
    return rule_start.removesuffix(os.sep)


def semgrep_rule_id(rule_id: str) -> str:
    """Convert an analyzer rule id into the dotted Semgrep form.

    Ids without a ``:`` separator are returned unchanged.
    """
    id_start = rule_id.rfind(":")
    if id_start == -1:
        logger.error(
            "Can't convert to semgrep RuleId format. RuleId '%s' doesn't contain ':'",
            rule_id,
        )
        return rule_id

    rule_path = _WHITESPACE.sub("", rule_id[:id_start])
    just_id = rule_id[id_start + 1:]
    rule_dirs = rule_path.split(os.sep)[:-1]
    return (".".join(rule_dirs) + "." + just_id).lstrip(".")


def update_rule_ids(report: SarifReport, abs_rules_path: str, user_rules_path: str) -> None:
    """Rewrite every result and rule id in place. Must run at most once per report."""
    rule_start = rule_id_path_start(user_rules_path)
    logger.debug(
        "Remapping rule ids (ruleset %s, relative start %r)", abs_rules_path, rule_start
    )
    for run in report.runs:
        for result in run.results:
            if result.ruleId is None:
                logger.warning("Result has no ruleId; skipping rule id remap")
                continue
            result.ruleId = semgrep_rule_id(result.ruleId)
        for rule in run.tool.driver.rules:
            rule.id = semgrep_rule_id(rule.id)
            if rule.name is not None:
                rule.name = semgrep_rule_id(rule.name)
