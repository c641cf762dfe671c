"""Analyze an exported approach history (JSON) from the command line.

Usage:
    python -m approach_engine.scripts.analyze_approaches export.json
    python -m approach_engine.scripts.analyze_approaches export.json --locale ja

The export is a JSON object with "approaches" (ApproachEventIn shape) and
optional "templates" ({id, name}). Prints conversion analysis and the
optimal send time derived from hourly period stats.
Exits 0 on success, 1 on invalid input.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from approach_engine.config import get_settings
from approach_engine.schemas.optimization import ConversionAnalysisRequest
from approach_engine.services.optimization import (
    analyze_conversion_rate,
    build_period_stats,
    compute_optimal_send_time,
    summarize_approaches,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", type=Path, help="JSON export with approaches and templates")
    parser.add_argument("--locale", default=None, help="Message locale (en, ja)")
    args = parser.parse_args(argv)

    locale = args.locale or get_settings().recommendation_locale
    try:
        payload = json.loads(args.path.read_text(encoding="utf-8"))
        body = ConversionAnalysisRequest.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    approaches = [a.to_domain() for a in body.approaches]
    templates = [t.to_domain() for t in body.templates]

    summary = summarize_approaches(approaches)
    print(
        f"total={summary.total_sent} opened={summary.total_opened} "
        f"replied={summary.total_replied} accepted={summary.total_accepted} "
        f"accept_rate={summary.accept_rate:.2%}"
    )

    analysis = analyze_conversion_rate(approaches, templates, locale=locale)
    print(f"overall_conversion_rate={analysis.overall_conversion_rate:.2%}")
    for row in analysis.by_template:
        print(f"  template {row.template_name}: {row.conversion_rate:.2%} (n={row.sample_size})")
    for row in analysis.by_time_slot:
        print(f"  hour {row.hour:02d}: {row.conversion_rate:.2%} (n={row.sample_size})")
    for row in analysis.by_day_of_week:
        print(f"  weekday {row.day_of_week}: {row.conversion_rate:.2%} (n={row.sample_size})")
    for rec in analysis.recommendations:
        print(f"- {rec}")

    optimal = compute_optimal_send_time(
        build_period_stats(approaches, granularity="hour"), locale=locale
    )
    print(f"optimal_send_time: day_of_week={optimal.day_of_week} hour={optimal.hour}")
    print(f"- {optimal.recommendation}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
