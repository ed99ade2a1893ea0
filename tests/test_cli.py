"""Tests for the command line interface."""

import json
import logging

import pytest

from reachkit.cli import create_parser, format_result, main, setup_logging

OBJECT_DOC = json.dumps(
    {
        "vertices": {"five": 5, "four": 4, "eight": 8, "seven": 7, "nine": 9, "one": 1},
        "edges": [
            ["five", "four"],
            ["five", "eight"],
            ["eight", "seven"],
            ["eight", "nine"],
            ["one", "seven"],
            ["nine", "eight"],
        ],
    }
)

KEYED_DOC = json.dumps({"adjacency": {"1": [2, -3], "2": [4], "-3": [5], "4": [], "5": []}})

NETWORK_DOC = json.dumps(
    {
        "professionals": {"ann": "X", "bob": "Y", "cat": "Z"},
        "connections": [["ann", "bob"], ["bob", "cat"]],
    }
)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Restore root logger handlers replaced by the CLI."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def run(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out.strip(), captured.err


def test_odd_vertices_command(capsys):
    """Test counting odd vertices from the command line."""
    assert run(capsys, "odd-vertices", OBJECT_DOC, "five")[:2] == (0, "3")


def test_sorted_reachable_command(capsys):
    """Test listing reachable values."""
    assert run(capsys, "sorted-reachable", OBJECT_DOC, "eight")[:2] == (0, "[7, 8, 9]")


def test_two_way_command(capsys):
    """Test two-way reachability."""
    assert run(capsys, "two-way", OBJECT_DOC, "eight", "nine")[:2] == (0, "true")
    assert run(capsys, "two-way", OBJECT_DOC, "five", "eight")[:2] == (0, "false")


def test_sorted_keys_command(capsys):
    """Test listing reachable keys, including a negative start key."""
    assert run(capsys, "sorted-keys", KEYED_DOC, "1")[:2] == (0, "[-3, 1, 2, 4, 5]")
    assert run(capsys, "sorted-keys", KEYED_DOC, "-3")[:2] == (0, "[-3, 5]")
    assert run(capsys, "sorted-keys", KEYED_DOC, "9")[:2] == (0, "[]")


def test_positive_path_command(capsys):
    """Test positive path queries."""
    assert run(capsys, "positive-path", KEYED_DOC, "1", "4")[:2] == (0, "true")
    assert run(capsys, "positive-path", KEYED_DOC, "1", "5")[:2] == (0, "false")


def test_company_search_command(capsys):
    """Test searching a mutual network; connections work in both directions."""
    assert run(capsys, "company-search", NETWORK_DOC, "ann", "Z")[:2] == (0, "true")
    assert run(capsys, "company-search", NETWORK_DOC, "cat", "X")[:2] == (0, "true")
    assert run(capsys, "company-search", NETWORK_DOC, "ann", "W")[:2] == (0, "false")


def test_document_from_file(capsys, tmp_path):
    """Test reading the document from an @file reference."""
    path = tmp_path / "graph.json"
    path.write_text(OBJECT_DOC)

    assert run(capsys, "odd-vertices", f"@{path}", "one")[:2] == (0, "2")


def test_unknown_vertex(capsys):
    """Test that naming an undeclared vertex fails cleanly."""
    status, out, err = run(capsys, "odd-vertices", OBJECT_DOC, "ghost")

    assert status == 1
    assert out == ""
    assert "Vertex 'ghost' not found in document" in err


def test_invalid_document(capsys):
    """Test that a document of the wrong kind is rejected."""
    status, _, err = run(capsys, "sorted-keys", OBJECT_DOC, "1")

    assert status == 1
    assert "Validation Error" in err


def test_invalid_memory_limit(capsys):
    """Test that a non-positive memory limit is a configuration error."""
    status, _, err = run(capsys, "--max-memory-mb", "0", "odd-vertices", OBJECT_DOC, "five")

    assert status == 1
    assert "max_memory_mb must be positive" in err


def test_no_command_prints_help(capsys):
    """Test running without a command."""
    status, out, _ = run(capsys)

    assert status == 2
    assert "usage: reachkit" in out


def test_trace_to_log_file(capsys, tmp_path):
    """Test that tracing writes visits to the log file."""
    log_file = tmp_path / "reachkit.log"

    status, out, _ = run(
        capsys,
        "--log-level",
        "DEBUG",
        "--log-file",
        str(log_file),
        "--trace",
        "odd-vertices",
        OBJECT_DOC,
        "five",
    )

    assert (status, out) == (0, "3")
    logging.getLogger().handlers[0].flush()
    assert log_file.read_text().count("Visiting") == 5


def test_format_result():
    """Test rendering of query results."""
    assert format_result(True) == "true"
    assert format_result(False) == "false"
    assert format_result([1, 2]) == "[1, 2]"
    assert format_result(3) == "3"


def test_parser_commands():
    """Test that every query has a subcommand."""
    parser = create_parser()
    args = parser.parse_args(["positive-path", "{}", "1", "-2"])

    assert args.command == "positive-path"
    assert (args.starting, args.ending) == (1, -2)


def test_setup_logging_closes_replaced_handlers(tmp_path):
    """Test that reconfiguring logging releases the previous log file."""
    setup_logging("INFO", str(tmp_path / "first.log"))
    first = logging.getLogger().handlers[0]

    setup_logging("INFO", str(tmp_path / "second.log"))

    assert logging.getLogger().handlers != [first]
    assert len(logging.getLogger().handlers) == 1
    assert first.stream is None


def test_repeated_runs_write_to_latest_log_file(capsys, tmp_path):
    """Test two CLI runs in one process with different log files."""
    first_log, second_log = tmp_path / "first.log", tmp_path / "second.log"
    doc = '{"vertices": {"a": 1}}'

    run(capsys, "--log-level", "DEBUG", "--log-file", str(first_log), "odd-vertices", doc, "a")
    run(capsys, "--log-level", "DEBUG", "--log-file", str(second_log), "odd-vertices", doc, "a")

    assert "Loaded object graph" in second_log.read_text()
    assert first_log.read_text().count("Loaded object graph") == 1
