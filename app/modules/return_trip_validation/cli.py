#!/usr/bin/env python3
"""
Command Line Interface for Return Trip Validation
=================================================

Runs the return trip consistency checks over an exported trip log (CSV).

Usage:
    return-trip-audit --trips-file trips.csv
    return-trip-audit --trips-file trips.csv --trip-id 7f1c...
    return-trip-audit --trips-file trips.csv --destinations-file destinations.csv --json
"""

import argparse
import asyncio
import sys
from datetime import datetime

import orjson as json
from loguru import logger

from . import __version__
from .application.services import ReturnTripValidationService
from .config import AggregationConfig
from .container import get_csv_container
from .domain import ReturnTripAnalysis, SystemWideReturnTripReport


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Return trip consistency audit for fleet trip logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --trips-file trips.csv
  %(prog)s --trips-file trips.csv --trip-id 7f1c5b0e-0000-0000-0000-000000000001
  %(prog)s --trips-file trips.csv --as-of 2024-07-31 --window-days 60 --json
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    data_group = parser.add_argument_group("Data Configuration")
    data_group.add_argument("--trips-file", "-f", type=str, required=True,
                            help="CSV export of the trip log")
    data_group.add_argument("--destinations-file", "-d", type=str,
                            help="CSV file with destination `id` and `name` columns")

    analysis_group = parser.add_argument_group("Analysis Parameters")
    analysis_group.add_argument("--trip-id", "-t", type=str,
                                help="Validate a single trip instead of the whole window")
    analysis_group.add_argument("--as-of", type=str,
                                help="Reference date for the analysis window (YYYY-MM-DD, default: now)")
    analysis_group.add_argument("--window-days", type=int, default=AggregationConfig.WINDOW_DAYS,
                                help=f"Days of trips to analyze (default: {AggregationConfig.WINDOW_DAYS})")
    analysis_group.add_argument("--limit", type=int, default=AggregationConfig.TRIP_LIMIT,
                                help=f"Maximum number of trips to analyze (default: {AggregationConfig.TRIP_LIMIT})")
    analysis_group.add_argument("--workers", type=int, default=AggregationConfig.MAX_CONCURRENCY,
                                help="Concurrent trip validations (default: sequential)")

    output_group = parser.add_argument_group("Output Configuration")
    output_group.add_argument("--json", action="store_true",
                              help="Print the result as JSON")
    output_group.add_argument("--verbose", "-v", action="store_true",
                              help="Enable verbose output")

    return parser.parse_args(argv)


def print_analysis(analysis: ReturnTripAnalysis):
    """Print a single trip analysis"""
    status = "✅" if not analysis.issues else "⚠️"
    print(f"{status} Trip {analysis.trip_id} ({analysis.vehicle_registration})")
    print(f"   Round trip: {analysis.is_round_trip} | Return found: {analysis.has_return_trip}")
    for issue in analysis.issues:
        print(f"   - [{issue.severity.value.upper()}] {issue.type.value}: {issue.description}")
        if issue.related_trip_serial:
            print(f"     Related trip: {issue.related_trip_serial}")
        print(f"     Route: {issue.route_description}")


def print_report(report: SystemWideReturnTripReport, verbose: bool = False):
    """Print the system-wide summary"""
    print("📊 Return trip validation summary")
    print("─" * 40)
    print(f"  Trips analyzed:   {report.total_trips_analyzed}")
    print(f"  Trips with issues: {report.trips_with_issues}")

    if report.issues_by_type:
        print("  Issues by type:")
        for issue_type, count in sorted(report.issues_by_type.items()):
            print(f"    {issue_type:<20} {count:>5}")
    if report.issues_by_severity:
        print("  Issues by severity:")
        for severity in ("high", "medium", "low"):
            print(f"    {severity:<20} {report.issues_by_severity.get(severity, 0):>5}")

    if verbose:
        print()
        for analysis in report.analyses:
            if analysis.issues:
                print_analysis(analysis)


async def run(args) -> int:
    container = get_csv_container(args.trips_file, args.destinations_file)
    if not await container.trip_repository.test_connection():
        print(f"❌ Trips file not found: {args.trips_file}")
        return 1

    service = ReturnTripValidationService(
        container=container,
        window_days=args.window_days,
        trip_limit=args.limit,
        max_concurrency=args.workers,
    )

    if args.trip_id:
        analysis = await service.validate_return_trip(args.trip_id)
        if analysis is None:
            print(f"❌ Trip {args.trip_id} could not be validated")
            return 1
        if args.json:
            print(analysis.json())
        else:
            print_analysis(analysis)
        return 0

    now = datetime.fromisoformat(args.as_of) if args.as_of else None
    report = await service.get_system_wide_return_trip_issues(now=now)
    if args.json:
        print(json.dumps(json.loads(report.json()), option=json.OPT_INDENT_2).decode())
    else:
        print_report(report, verbose=args.verbose)
    return 0


def main(argv=None):
    """Main CLI entry point"""
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\n⏹️  Analysis interrupted by user")
        return 1
    except Exception as e:
        print(f"❌ Analysis failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
