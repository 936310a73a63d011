"""
Run required-attribute validation on a JSON document.

Reads:
  - <document>  JSON document to validate (raw text, so duplicate keys are noticed)
  - <checks>    JSON list of {"path", "attribute", "possibleValues"} checks

Produces:
  - the aggregated report (stdout summary, optional --output JSON file)

Exit status is 1 when the report contains errors.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate

from validation_report.aggregation.pipeline import validate_document
from validation_report.config.schemas import REQUIRED_CHECKS_SCHEMA
from validation_report.config.settings import LOG_LEVEL
from validation_report.models.required_check import RequiredAttributeCheck

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("run_validation")


def _parse_args(argv):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("document", type=Path, help="JSON document to validate")
    parser.add_argument("checks", type=Path, help="JSON list of required-attribute checks")
    parser.add_argument("--output", type=Path, default=None, help="Write the report JSON here")
    return parser.parse_args(argv)


def load_checks(path: Path):
    with open(path, encoding="utf-8") as f:
        raw_checks = json.load(f)
    try:
        validate(instance=raw_checks, schema=REQUIRED_CHECKS_SCHEMA)
    except SchemaValidationError as e:
        raise SystemExit(f"Invalid checks file {path}: {e.message}") from e
    return [RequiredAttributeCheck.from_dict(c) for c in raw_checks]


def main(argv=None) -> int:
    args = _parse_args(argv)

    logger.info("Loading input...")
    document_text = args.document.read_text(encoding="utf-8")
    checks = load_checks(args.checks)
    logger.info("document : %s (%d chars)", args.document, len(document_text))
    logger.info("checks   : %d", len(checks))

    report = validate_document(document_text, checks)

    if args.output is not None:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(report.model_dump(), f, ensure_ascii=False, indent=2)
        logger.info("Report written to: %s", args.output)

    # -----------------------------------------------------------------------
    # Summary
    # -----------------------------------------------------------------------
    print("\n" + "=" * 70)
    print("VALIDATION REPORT")
    print("=" * 70)
    print(f"valid    : {report.valid}")
    print(f"errors   : {report.error_count} ({report.required_error_count} required)")
    for issue in report.errors:
        marker = "R" if issue.required else " "
        print(f"  [{marker}] {issue.path or '<root>':30s} {issue.message}")
    print(f"warnings : {report.warning_count}")
    for issue in report.warnings:
        print(f"      {issue.path or '<root>':30s} {issue.message}")
    print("=" * 70 + "\n")

    return 0 if report.valid else 1


if __name__ == "__main__":
    sys.exit(main())
