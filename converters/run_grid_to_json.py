# converters/run_grid_to_json.py
from __future__ import annotations

from .contracts import PatchConfig
from .formatting import assemble_document, format_lines, patch_digits
from .ingest import read_line_records
from .io_utils import PathLike, write_text


IN_PATH = "utils/input.txt"
OUT_PATH = "utils/output.json"


def convert_lines_file(
    in_path: PathLike,
    out_path: PathLike,
    cfg: PatchConfig = PatchConfig(),
) -> str:
    """
    Space-separated grid rows -> JSON array-of-arrays text, digit patched.

    The output is not re-parsed: patching can produce text that is not valid JSON.
    """
    records = read_line_records(in_path)
    document = assemble_document(format_lines(records))
    document, _ = patch_digits(document, cfg)
    write_text(out_path, document)
    return document


def main() -> None:
    convert_lines_file(IN_PATH, OUT_PATH)
    print("File processed successfully.")


if __name__ == "__main__":
    main()
