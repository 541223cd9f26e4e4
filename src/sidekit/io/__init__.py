"""I/O operations for sidekit."""

from sidekit.io.files import create_dir, read_file, write_file
from sidekit.io.frontmatter import parse_rule, split_frontmatter, stringify_rule
from sidekit.io.json_documents import (
    dump_json_document,
    parse_json_document,
    read_json_document,
    read_json_object,
    write_json_document,
)

__all__ = [
    "create_dir",
    "dump_json_document",
    "parse_json_document",
    "parse_rule",
    "read_file",
    "read_json_document",
    "read_json_object",
    "split_frontmatter",
    "stringify_rule",
    "write_file",
    "write_json_document",
]
