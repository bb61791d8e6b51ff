"""Pytest configuration and shared fixtures for the md2docx test suite."""

from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir

from md2docx.ast import (
    Document,
    List,
    ListItem,
    Paragraph,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "docx: Tests that render or inspect .docx output")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files."""
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def sample_markdown() -> str:
    """Markdown exercising every construct the renderer handles."""
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Section 2

- Item 1
- Item 2
  - Nested item

1. First item
2. Second item

> A quoted line

```python
def hello_world():
    print("Hello, World!")
```

See [the docs](https://example.com/docs "Docs").

| Name | Score |
|:-----|------:|
| Ann  | 10    |
| Bob  | 7     |
"""


@pytest.fixture
def hello_world_doc() -> Document:
    """``hello `` followed by bold ``world`` in one paragraph."""
    return Document(children=[Paragraph(children=[Text("hello "), Strong(children=[Text("world")])])])


@pytest.fixture
def nested_list_doc() -> Document:
    """An ordered list whose first item contains a bulleted sub-list."""
    inner = List(ordered=False, children=[ListItem(children=[Paragraph(children=[Text("inner")])])])
    return Document(
        children=[
            List(
                ordered=True,
                children=[ListItem(children=[Paragraph(children=[Text("outer")]), inner])],
            )
        ]
    )


@pytest.fixture
def simple_table_doc() -> Document:
    """A two-column table with one header row and one body row."""
    return Document(
        children=[
            Table(
                children=[
                    TableHead(children=[TableRow(children=[TableCell([Text("A")]), TableCell([Text("B")])])]),
                    TableBody(children=[TableRow(children=[TableCell([Text("1")]), TableCell([Text("2")])])]),
                ]
            )
        ]
    )
