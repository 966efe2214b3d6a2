"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


SAMPLE_WIKI = """\
Some article prose before the table.
{| class="wikitable sortable"
|+ Games with MT-32 support
|-
! Title !! Year
! Publisher
|-
|''[[The Secret of Monkey Island]]''
|1990||Lucasfilm
|-
| ''Loom'' || 1990 || Lucasfilm
|}
Trailing text that is ignored.
"""


@pytest.fixture
def write_file(tmp_path):
    """Return a helper that writes text to a file under tmp_path and returns its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_wiki() -> str:
    return SAMPLE_WIKI
