#!/usr/bin/env python3
"""
Command-line interface for the VendoAI marketing backend.

Usage:
    python cli.py [command] [options]

Commands:
    serve       Start the API server
    vendors     Search the vendor catalog
    rfp         Print an RFP draft
    test        Run the test suite

Examples:
    python cli.py serve --reload
    python cli.py vendors kyc
    python cli.py rfp --goal "Build a mobile app" --budget "₹10L"
"""

import argparse
import subprocess
import sys


def run_vendor_search(query: str) -> None:
    """Print vendors matching a query."""
    from shared.data_store import DataStore

    vendors = DataStore().search_vendors(query)
    if not vendors:
        print(f"No vendors match {query!r}")
        return
    for vendor in vendors:
        print(f"{vendor.id}  {vendor.name:<20} {vendor.domain:<16} {vendor.summary}")


def run_rfp(goal: str, scope: str, budget: str) -> None:
    """Print an RFP draft."""
    from shared.models import RfpRequest
    from shared.templates import build_rfp_draft

    print(build_rfp_draft(RfpRequest(goal=goal, scope=scope, budget=budget)))


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = [sys.executable, "-m", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = [sys.executable, "-m", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def main() -> None:
    """Main CLI entry point."""
    from api.config import Settings

    settings = Settings.from_env()

    parser = argparse.ArgumentParser(
        description="VendoAI Backend CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s serve --reload
  %(prog)s vendors payments
  %(prog)s rfp --goal "Build a mobile app"
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=settings.host, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    # Vendors command
    vendors_parser = subparsers.add_parser("vendors", help="Search the vendor catalog")
    vendors_parser.add_argument("query", nargs="?", default="", help="Free-text query")

    # RFP command
    rfp_parser = subparsers.add_parser("rfp", help="Print an RFP draft")
    rfp_parser.add_argument("--goal", required=True, help="What the project should achieve")
    rfp_parser.add_argument("--scope", default="", help="Key features or deliverables")
    rfp_parser.add_argument("--budget", default="", help="Estimated budget")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    args = parser.parse_args()

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "vendors":
        run_vendor_search(args.query)
    elif args.command == "rfp":
        run_rfp(args.goal, args.scope, args.budget)
    elif args.command == "test":
        run_tests(args.pytest_args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
