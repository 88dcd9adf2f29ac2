import pytest

from schemas.schemas_path import Coordinate


@pytest.fixture
def coord():
    """Shorthand: coord(1, 2) -> Coordinate(row=1, column=2)."""
    def _make(row, column):
        return Coordinate(row=row, column=column)
    return _make


@pytest.fixture
def write_file(tmp_path):
    def _write(rel, content, newline=""):
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", encoding="utf-8", newline=newline) as f:
            f.write(content)
        return p
    return _write
