from pathlib import Path

import pytest


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    for rel, body in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(body, bytes):
            path.write_bytes(body)
        else:
            path.write_text(body, encoding="utf-8")


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    write_tree(
        tmp_path,
        {
            "a.txt": "hello world",
            "b.log": "foo\nhello\n",
            "docs/README.md": "# Title\nsay Hello here\n",
            "docs/notes.TXT": "nothing to see\n",
            "docs/deep/c.txt": "x\nhello\ny\nz\nhello again\n",
        },
    )
    return tmp_path
