from __future__ import annotations

import argparse
import json

from src.core.config import SETTINGS
from src.core.schemas import INPUT_FIELDS, default_values
from src.tools.projection_tools import ProjectionError, tool_project_wealth
from src.utils.formatting import format_inr
from src.utils.logging import setup_logging, start_run
from src.utils.projection_models import ProjectionResult, ProjectionSummary
from src.web_app.ui_helpers import results_frame, summary_lines


def _flag(attr: str) -> str:
    return "--" + attr.replace("_", "-")


def cmd_project(args: argparse.Namespace) -> int:
    start_run("cli")
    payload = {f.key: getattr(args, f.attr) for f in INPUT_FIELDS}

    try:
        out = tool_project_wealth(payload)
    except ProjectionError as e:
        print(f"ERROR: {e.envelope.message}")
        return 2

    if args.json:
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return 0

    result = ProjectionResult.model_validate(out["projection"])
    df = results_frame(result)
    if df.empty:
        print("No yearly results (investment period is zero).")
    else:
        money_cols = [c for c in df.columns if c != "year"]
        print(df.to_string(index=False, formatters={c: format_inr for c in money_cols}))

    summary = ProjectionSummary.model_validate(out["summary"]) if out["summary"] else None
    for line in summary_lines(summary):
        print(line)
    return 0


def main() -> None:
    p = argparse.ArgumentParser(prog="wealth_cli", description="Future wealth projection")
    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("project", help="Project wealth year by year")
    defaults = default_values()
    for f in INPUT_FIELDS:
        pr.add_argument(_flag(f.attr), dest=f.attr, default=None, help=f"{f.label} (default {defaults[f.key]})".replace("%", "%%"))
    pr.add_argument("--json", action="store_true")
    pr.add_argument("--verbose", action="store_true", help="Log at the configured level instead of WARNING")
    pr.set_defaults(func=cmd_project)

    args = p.parse_args()
    # keep stdout clean for --json unless asked
    setup_logging(SETTINGS.log_level if args.verbose else "WARNING")
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
