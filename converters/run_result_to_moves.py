# converters/run_result_to_moves.py
from __future__ import annotations

from .contracts import MoveSequence
from .io_utils import PathLike, write_text
from .moves import assemble_sequence
from .result_loader import load_solution_path


IN_PATH = "outputs/final_pt_1.result.json"
OUT_PATH = "formatted_results/output1.txt"


def convert_result_file(in_path: PathLike, out_path: PathLike) -> MoveSequence:
    path = load_solution_path(in_path)
    # nothing is written unless the whole path encodes
    sequence = assemble_sequence(path)
    write_text(out_path, sequence.text)
    return sequence


def main() -> None:
    sequence = convert_result_file(IN_PATH, OUT_PATH)
    print(f"Wrote solution with {sequence.count} moves.")


if __name__ == "__main__":
    main()
