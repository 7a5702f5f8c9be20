"""Command-line entrypoint for building a packing plan."""

import argparse
import json
import sys

from packing_app.app import PackingAssistantApp


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Recommend a packing list for a trip.")
    parser.add_argument("--destination", required=True)
    parser.add_argument("--start", required=True, help="YYYY-MM-DD")
    parser.add_argument("--end", required=True, help="YYYY-MM-DD")
    parser.add_argument(
        "--tolerance",
        default="neutral",
        choices=["cold-sensitive", "neutral", "heat-sensitive"],
    )
    args = parser.parse_args(argv)

    app = PackingAssistantApp()
    response = app.get_plan(
        {
            "destination": args.destination,
            "start_date": args.start,
            "end_date": args.end,
            "tolerance": args.tolerance,
        },
        client_id="cli",
    )
    print(json.dumps(response, indent=2))
    return 0 if response.get("status") == "ok" else 1


if __name__ == "__main__":
    sys.exit(main())
