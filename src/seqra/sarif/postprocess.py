# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Single-pass post-processing of an analyzer SARIF report."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence

from seqra.core.constants import SOURCE_FILE_EXTENSIONS
from seqra.models.sarif import SarifReport
from seqra.sarif.ruleid import rule_id_path_start, update_rule_ids
from seqra.sarif.sanitize import (
    keep_only_file_locations,
    keep_only_one_code_flow_element,
    set_tool_driver,
    source_root_uri,
    update_uri_info,
)

logger = logging.getLogger("seqra.sarif.postprocess")


def postprocess_report(
    report: SarifReport,
    *,
    source_root: str,
    analyzer_version: str,
    semantic_version: str,
    user_rulesets: Sequence[str] = (),
    semgrep_compatibility: bool = True,
    extensions: Iterable[str] = SOURCE_FILE_EXTENSIONS,
) -> SarifReport:
    """Run every clean-up pass over ``report`` in place and return it.

    Rule ids are remapped only with ``semgrep_compatibility``; the remap is not
    idempotent, so a report must go through here once.
    """
    keep_only_file_locations(report, extensions)
    keep_only_one_code_flow_element(report)
    update_uri_info(report, source_root_uri(source_root))
    set_tool_driver(report, analyzer_version, semantic_version)

    if semgrep_compatibility:
        for ruleset in user_rulesets[1:]:
            logger.debug(
                "Ruleset %s (relative start %r)",
                os.path.abspath(ruleset),
                rule_id_path_start(ruleset),
            )
        # Converted ids depend only on the id itself, so one remap covers every ruleset
        first = user_rulesets[0] if user_rulesets else ""
        update_rule_ids(report, os.path.abspath(first) if first else "", first)

    logger.info(
        "Post-processed SARIF report: %d run(s), %d result(s)",
        len(report.runs),
        sum(len(run.results) for run in report.runs),
    )
    return report
