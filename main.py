import argparse
import logging
import sys

from pydantic import ValidationError

from failreport.core.config import LOG_DIR, LOG_LEVEL
from failreport.core.constants import ErrorKey
from failreport.core.failure_formatter import format_failure_for_error
from failreport.core.report_formatter import format_error_report, formatted_description_for_error
from failreport.models.error_record import ErrorRecord
from failreport.parser.classification import should_use_error_formatter
from failreport.utils.logging_config import setup_logging

logger = logging.getLogger("main")

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="failreport",
        description="Render a UI-interaction error record (JSON) as a failure report.",
    )
    parser.add_argument(
        "record",
        nargs="?",
        default="-",
        help="Path to the ErrorRecord JSON file, or '-' for stdin (default).",
    )
    parser.add_argument(
        "--failure-name",
        default=None,
        help="Render the generic failure format with this failure name.",
    )
    parser.add_argument(
        "--failure-label",
        default=None,
        help="Label printed before the failure name (default: Failure).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="KEY",
        help="Error key to leave out of the generic failure format (repeatable).",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Log level for stderr output (default: %(default)s).",
    )
    return parser


def _read_record(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level.upper(), log_dir=LOG_DIR or None)

    try:
        raw = _read_record(args.record)
    except OSError as e:
        logger.error("Could not read error record from %s: %s", args.record, e)
        return EXIT_INVALID_INPUT

    try:
        record = ErrorRecord.model_validate_json(raw)
    except ValidationError as e:
        logger.error("Invalid error record: %s", e)
        return EXIT_INVALID_INPUT

    logger.info("Formatting error record (%s, %s)", record.domain, record.code)

    if args.failure_name is not None:
        excluding = list(args.exclude)
        if should_use_error_formatter(record.domain, record.code):
            # The structured report already ends with the hierarchy section.
            excluding.append(ErrorKey.APP_UI_HIERARCHY)
            description = format_error_report(record)
        else:
            description = record.message
        report = format_failure_for_error(
            record,
            excluding=excluding,
            failure_label=args.failure_label,
            failure_name=args.failure_name,
            error_description=description,
        )
    else:
        report = formatted_description_for_error(record)

    sys.stdout.write(report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
