"""Main module for the harvestpy package."""
import os
import sys
import logging
import argparse
from typing import List, Optional
from dotenv import load_dotenv

from .api.client import Client, DEFAULT_BASE_URL
from .api.context import Context
from .api.errors import AuthError, HarvestError
from .api.time_entries import TimeEntriesListOptions
from .models.time_entry import TimeEntry
from .reports.report_generator import ReportGenerator
from .utils.date_utils import parse_date, lookback_range, day_str

logger = logging.getLogger("harvestpy")

ENV_FILE = "harvestpy.env"
DEFAULT_LOOKBACK_DAYS = 14

# --- Environment Setup ---
def load_environment(env_file: str = ENV_FILE) -> None:
    """Load environment variables from the harvestpy.env file, if there is one."""
    if os.path.exists(env_file):
        load_dotenv(env_file)
        logger.debug("Loaded environment from %s", env_file)

def get_env_var(key: str) -> str:
    """Get an environment variable or exit if not found.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        SystemExit: If the environment variable is not found
    """
    value = os.getenv(key)
    if not value:
        print(f"Set {key} in your environment or {ENV_FILE}.")
        sys.exit(1)
    return value

# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Fetch and display Harvest time entries in a clean table.",
        epilog="""
Examples:
    # Show the entries of the last two weeks
  harvestpy
    ---
    # Show a custom date range, following every page, and export to CSV files with prefix 'jan'
  harvestpy --from 2024-01-01 --to 2024-01-31 --all --csv jan
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="harvestpy"
    )
    parser.add_argument('--from', dest='from_date', type=parse_date, help='Start date (YYYY-MM-DD), default: 14 days ago')
    parser.add_argument('--to', dest='to_date', type=parse_date, help='End date (YYYY-MM-DD), default: today')
    parser.add_argument('--page', type=int, default=1, help='Page to fetch (default: 1)')
    parser.add_argument('--per-page', type=int, default=100, help='Entries per page (default: 100)')
    parser.add_argument('--all', action='store_true', help='Follow pagination and fetch every page')
    parser.add_argument('--timeout', type=float, default=60.0, help='Give up after this many seconds (default: 60)')
    parser.add_argument('--csv', help='Export tables to CSV (provide filename prefix)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log requests and responses')
    return parser.parse_args(argv)

def build_client() -> Client:
    """Create a Client from HARVEST_* environment variables."""
    return Client(
        get_env_var("HARVEST_ACCESS_TOKEN"),
        get_env_var("HARVEST_ACCOUNT_ID"),
        base_url=os.getenv("HARVEST_BASE_URL") or DEFAULT_BASE_URL,
    )

def fetch_entries(client: Client, ctx: Context, opts: TimeEntriesListOptions, follow_all: bool = False) -> List[TimeEntry]:
    """Fetch one page of time entries, or every page from opts.page on.

    Args:
        client: API client
        ctx: Context bounding all requests
        opts: Date range and page selection
        follow_all: Whether to follow pagination to the last page

    Returns:
        List of time entries
    """
    if follow_all:
        return list(client.time_entries.iter_all(ctx, opts))
    entries, resp = client.time_entries.list(ctx, opts)
    logger.info("Page %d of %d", resp.pagination.page if resp.pagination else 0, resp.last_page)
    return entries

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_environment()

    start_date, end_date = lookback_range(DEFAULT_LOOKBACK_DAYS)
    start_date = args.from_date or start_date
    end_date = args.to_date or end_date

    client = build_client()
    opts = TimeEntriesListOptions(
        from_date=start_date.isoformat(),
        to_date=end_date.isoformat(),
        page=args.page,
        per_page=args.per_page,
    )

    with Context.with_timeout(Context.background(), args.timeout) as ctx:
        try:
            entries = fetch_entries(client, ctx, opts, args.all)
        except AuthError as e:
            print(f"[ERROR] Authentication failed: {e}")
            sys.exit(2)
        except HarvestError as e:
            print(f"[ERROR] Fetching time entries failed: {e}")
            sys.exit(1)

    if not entries:
        print(f"\n⚠️  No time entries found for {day_str(start_date)} to {day_str(end_date)}")
        return

    print(f"📊 Found {len(entries)} time entries")
    report_generator = ReportGenerator(entries, f"{day_str(start_date)} to {day_str(end_date)}")
    print(report_generator.generate_report(args.csv))

if __name__ == "__main__":
    main()
