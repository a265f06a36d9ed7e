"""Script to search the EA container and download every match."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ea_datagrabber.client import DataGrabberClient
from ea_datagrabber.config import Config


def main(queries):
    """Main download script."""
    print("Loading configuration...")
    config = Config.load()
    config.ensure_directories()

    print(f"\nConfiguration:")
    print(f"  Listing: {config.listing.listing_url}")
    print(f"  Output: {config.paths.output_dir}")
    print(f"  Binary timeout: {config.listing.binary_timeout} seconds")

    failures = 0
    with DataGrabberClient(config.listing) as client:
        for query in queries:
            print(f"\n{'=' * 80}")
            print(f"Query: {query}")
            print(f"{'=' * 80}")

            prefix, date_range, records = client.search(query)
            print(f"  Prefix: {prefix or '(none)'}")
            print(f"  Start: {date_range.start_date or '-'}  End: {date_range.end_date or '-'}")
            print(f"  Matching files: {len(records)}")

            summary = client.download_batch(records, config.paths.output_dir)
            failures += summary.failed + summary.skipped

            print(f"\nSummary:")
            print(f"  Total: {summary.total}")
            print(f"  ✓ Completed: {summary.completed}")
            print(f"  ✗ Failed: {summary.failed}")
            print(f"  ⊘ Skipped (unsupported type): {summary.skipped}")
            for name in summary.failed_files:
                print(f"    - {name}")

    return 1 if failures else 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print('usage: 01_download_datasets.py "Datasets/Wholesale/... [-sd YYYY-MM-DD] [-ed YYYY-MM-DD]" ...')
        sys.exit(2)
    sys.exit(main(sys.argv[1:]))
