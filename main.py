#!/usr/bin/env python3
"""
X12 Delimiter Detection Command Line Tool

Reads the ISA header of an EDI file and reports its delimiters as JSON.

Usage:
    python main.py input.edi                        # Print delimiters to stdout
    python main.py input.edi --output result.json   # Write delimiters to a file
    python main.py input.edi --log-level DEBUG      # Show detection details
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

# Try importing from installed package first, fallback to src path
try:
    from delimiter_checks import DelimiterIssue, check_delimiters
    from x12_delimiters import Delimiters, detect_delimiters
except ImportError:
    # Add src to path for imports when not installed
    sys.path.insert(0, str(Path(__file__).parent / "src"))
    from delimiter_checks import DelimiterIssue, check_delimiters
    from x12_delimiters import Delimiters, detect_delimiters

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s"


class DelimiterReport(BaseModel):
    segment_terminator: str
    element_separator: str
    sub_element_separator: str
    codes: Delimiters
    valid: bool
    issues: List[DelimiterIssue]


def build_report(delimiters: Delimiters) -> DelimiterReport:
    return DelimiterReport(
        segment_terminator=delimiters.segment_terminator_char,
        element_separator=delimiters.element_separator_char,
        sub_element_separator=delimiters.sub_element_separator_char,
        codes=delimiters,
        valid=delimiters.are_valid(),
        issues=check_delimiters(delimiters),
    )


def report_edi_file(input_file: str, output_file: Optional[str] = None) -> int:
    """Detect delimiters in an EDI file and write the JSON report."""
    try:
        logger.info(f"Loading EDI file: {input_file}")
        with open(input_file, 'rb') as f:
            edi_content = f.read()
        logger.info(f"Loaded {len(edi_content)} bytes")

        delimiters = detect_delimiters(edi_content)
        report = build_report(delimiters)
        json_output = report.model_dump_json(indent=2)

        if output_file:
            with open(output_file, 'w') as f:
                f.write(json_output)
            print(f"Delimiter report saved to: {output_file}")
        else:
            print(json_output)

        if report.issues:
            print(f"Delimiters are not usable, {len(report.issues)} issues found:", file=sys.stderr)
            for i, issue in enumerate(report.issues):
                print(f"  {i+1}. {issue.message}", file=sys.stderr)
            return 1
        return 0

    except FileNotFoundError as e:
        print(f"Error: File not found: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Error during delimiter detection: {e}", exc_info=True)
        print(f"Error during delimiter detection: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command line argument parsing."""
    parser = argparse.ArgumentParser(
        description="Detect X12 delimiters from an EDI file's ISA header",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py claims.edi                       # Report to stdout
  python main.py claims.edi -o delimiters.json    # Report to a file
        """
    )
    parser.add_argument('input_file', help='Input EDI file')
    parser.add_argument('-o', '--output', dest='output_file',
                        help='Output JSON file (default: stdout)')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    if not Path(args.input_file).exists():
        print(f"Error: Input file not found: {args.input_file}", file=sys.stderr)
        return 1

    return report_edi_file(args.input_file, args.output_file)


if __name__ == "__main__":
    sys.exit(main())
