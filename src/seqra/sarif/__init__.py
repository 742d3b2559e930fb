# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF report post-processing: rule id remapping, sanitizing, summaries."""

from seqra.sarif.postprocess import postprocess_report
from seqra.sarif.ruleid import rule_id_path_start, semgrep_rule_id, update_rule_ids
from seqra.sarif.sanitize import (
    keep_only_file_locations,
    keep_only_one_code_flow_element,
    set_tool_driver,
    source_root_uri,
    update_uri_info,
)
from seqra.sarif.summary import Summary, generate_summary

__all__ = [
    "Summary",
    "generate_summary",
    "keep_only_file_locations",
    "keep_only_one_code_flow_element",
    "postprocess_report",
    "rule_id_path_start",
    "semgrep_rule_id",
    "set_tool_driver",
    "source_root_uri",
    "update_rule_ids",
    "update_uri_info",
]
