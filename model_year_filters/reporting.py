"""
Reporting and export utilities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

import pandas as pd

from .planner import ACTION_NONE


logger = logging.getLogger(__name__)


def print_summary(source: str, results: Dict) -> None:
    first = results["first_year"] if results["first_year"] is not None else "open"
    last = results["last_year"] if results["last_year"] is not None else "open"
    logger.info("\n" + "=" * 60)
    logger.info("FILTER PLAN")
    logger.info("=" * 60)
    logger.info("Source: %s", source)
    logger.info("Generation span: %s to %s", first, last)
    logger.info("-" * 60)
    logger.info("Commands: %s", results["num_commands"])
    logger.info("Commands with confirmed support: %s", results["num_with_support"])
    logger.info("Production filter changes: %s", results["filter_changes"])
    logger.info("Debug filter changes: %s", results["debug_changes"])
    logger.info("=" * 60)


def save_results_json(results: Dict, output_dir: Path, name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / f"{name}_filter_plan.json"
    payload = {key: value for key, value in results.items() if key != "plan"}
    if "plan" in results:
        payload["commands"] = results["plan"].to_dict(orient="records")
    with open(results_file, "w") as f:
        json.dump(payload, f, indent=2, default=str)
    return results_file


def export_plan_csv(results: Dict, output_dir: Path, name: str) -> Path | None:
    if "plan" not in results:
        return None
    output_dir.mkdir(parents=True, exist_ok=True)
    plan_file = output_dir / f"{name}_filter_plan.csv"
    results["plan"].to_csv(plan_file, index=False)
    return plan_file


def export_worksheets(results: Dict, output_dir: Path, name: str) -> Path | None:
    if "plan" not in results:
        return None
    output_dir.mkdir(parents=True, exist_ok=True)
    excel_file = output_dir / f"{name}_worksheets.xlsx"
    plan_df: pd.DataFrame = results["plan"]
    sheets = {
        "all commands": plan_df,
        "filter changes": plan_df[plan_df["filter_action"] != ACTION_NONE],
        "debug filter changes": plan_df[plan_df["debug_action"] != ACTION_NONE],
    }
    with pd.ExcelWriter(excel_file, engine="openpyxl") as writer:
        for sheet_name, sheet_df in sheets.items():
            # Excel sheet names have a 31 character limit
            sheet_df.to_excel(writer, sheet_name=sheet_name[:31], index=False)
    return excel_file
