"""Command Line Interface for the reachability toolkit.

This module runs reachability queries against graph documents. Documents can
be provided either as a direct JSON string or as a file path prefixed with '@'.

The CLI supports the following commands:
    - odd-vertices: Count odd-valued vertices reachable from a vertex
    - sorted-reachable: List values reachable from a vertex, sorted
    - sorted-keys: List keys reachable from a key of a keyed graph, sorted
    - two-way: Check whether two vertices reach each other
    - positive-path: Check for a path through positive keys only
    - company-search: Check whether someone in a person's extended network
      works for a company

Example Usage:
    reachkit odd-vertices @data/graph.json five
    reachkit sorted-keys '{"adjacency": {"1": [2], "2": []}}' 1
    reachkit company-search @data/network.json ann Initech
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .core.config import TraversalConfig
from .core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ValidationError,
)
from .core.serialization import GraphLoader, parse_json_input
from .core.traversal import (
    has_extended_connection_at_company,
    odd_vertices,
    positive_path_exists,
    sorted_reachable,
    sorted_reachable_keys,
    two_way,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    """Configure root logging for a CLI run.

    Args:
        level: Logging level name, e.g. "DEBUG"
        log_file: Optional file to log to instead of stderr
    """
    handler: logging.Handler = (
        logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stderr)
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    for previous in root.handlers[:]:
        root.removeHandler(previous)
        previous.close()
    root.addHandler(handler)
    root.setLevel(level)


def lookup(named: Dict[str, Any], name: str, what: str) -> Any:
    """Find a named vertex or professional in a loaded document.

    Raises:
        NodeNotFoundError: If the document does not declare the name.
    """
    if name not in named:
        raise NodeNotFoundError(f"{what} '{name}' not found in document")
    return named[name]


def format_result(result: Any) -> str:
    """Render a query result for standard output."""
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, list):
        return json.dumps(result)
    return str(result)


def run_query(args: argparse.Namespace, config: TraversalConfig) -> Any:
    """Load the document named by the arguments and run the selected query.

    Args:
        args: Parsed command-line arguments
        config: Traversal settings for the query

    Returns:
        The raw query result

    Raises:
        ValidationError: If the document is invalid
        NodeNotFoundError: If a named vertex or professional is missing
        GraphOperationError: If the command is unknown
    """
    loader = GraphLoader()
    document = parse_json_input(args.document)

    if args.command in ("odd-vertices", "sorted-reachable", "two-way"):
        vertices = loader.load_object_graph(document)
        if args.command == "odd-vertices":
            return odd_vertices(lookup(vertices, args.start, "Vertex"), config=config)
        if args.command == "sorted-reachable":
            return sorted_reachable(lookup(vertices, args.start, "Vertex"), config=config)
        return two_way(
            lookup(vertices, args.v1, "Vertex"), lookup(vertices, args.v2, "Vertex"), config=config
        )

    if args.command == "sorted-keys":
        graph = loader.load_keyed_graph(document)
        return sorted_reachable_keys(graph, args.start_key, config=config)

    if args.command == "positive-path":
        graph = loader.load_keyed_graph(document)
        return positive_path_exists(graph, args.starting, args.ending, config=config)

    if args.command == "company-search":
        people = loader.load_network(document)
        person = lookup(people, args.person, "Professional")
        return has_extended_connection_at_company(person, args.company, config=config)

    raise GraphOperationError(f"Unknown command: {args.command}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="reachkit", description="Graph reachability queries")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Write log records to this file instead of stderr")
    parser.add_argument(
        "--max-memory-mb",
        type=float,
        help="Abort a traversal whose memory growth exceeds this many megabytes",
    )
    parser.add_argument("--trace", action="store_true", help="Log every visited node")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    doc_help = "JSON string or @filename containing the graph document"

    odd = subparsers.add_parser("odd-vertices", help="Count reachable odd-valued vertices")
    odd.add_argument("document", help=doc_help)
    odd.add_argument("start", help="Name of the starting vertex")

    values = subparsers.add_parser("sorted-reachable", help="List reachable values, sorted")
    values.add_argument("document", help=doc_help)
    values.add_argument("start", help="Name of the starting vertex")

    keys = subparsers.add_parser("sorted-keys", help="List reachable keys, sorted")
    keys.add_argument("document", help=doc_help)
    keys.add_argument("start_key", type=int, help="Starting key")

    both = subparsers.add_parser("two-way", help="Check whether two vertices reach each other")
    both.add_argument("document", help=doc_help)
    both.add_argument("v1", help="Name of the first vertex")
    both.add_argument("v2", help="Name of the second vertex")

    positive = subparsers.add_parser(
        "positive-path", help="Check for a path through positive keys only"
    )
    positive.add_argument("document", help=doc_help)
    positive.add_argument("starting", type=int, help="Starting key")
    positive.add_argument("ending", type=int, help="Ending key")

    company = subparsers.add_parser(
        "company-search", help="Search a person's extended network for a company"
    )
    company.add_argument("document", help=doc_help)
    company.add_argument("person", help="Name of the professional to start from")
    company.add_argument("company", help="Company name to look for")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    setup_logging(args.log_level, args.log_file)

    try:
        config = TraversalConfig(max_memory_mb=args.max_memory_mb, trace=args.trace)
        result = run_query(args, config)
    except (
        ConfigurationError,
        GraphOperationError,
        NodeNotFoundError,
        ValidationError,
        MemoryError,
    ) as e:
        logger.debug("Query failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
