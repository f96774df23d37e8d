from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ..core import assess
from ..errors import TalentRiskError
from ..io import dump_result_file, load_answers_file
from ..models import ANSWER_CHOICES, AnswerSet
from .terminal import TerminalView, run_interactive


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talent-risk-score",
        description="Score bilingual talent attrition risk from four questionnaire answers.",
    )
    parser.add_argument("input", nargs="?", help="Optional JSON file with the answers object")
    parser.add_argument("--firm-size", choices=ANSWER_CHOICES["firm_size"])
    parser.add_argument("--bilingual-exposure", choices=ANSWER_CHOICES["bilingual_exposure"])
    parser.add_argument("--region", choices=ANSWER_CHOICES["region"])
    parser.add_argument("--hiring-pressure", choices=ANSWER_CHOICES["hiring_pressure"])
    parser.add_argument("--out", default="", help="Write the full assessment JSON to this path")
    parser.add_argument("--format", choices=("json", "text"), default="text", help="Console output format")
    parser.add_argument("--interactive", action="store_true", help="Answer the questionnaire step by step")
    return parser


def _collect_answers(args: argparse.Namespace) -> AnswerSet:
    answers = AnswerSet()
    if args.input:
        input_path = Path(args.input).resolve()
        if not input_path.exists() or not input_path.is_file():
            raise FileNotFoundError(f"input file not found: {input_path}")
        answers = load_answers_file(input_path)
    # Flags override values from the input file.
    for name in ANSWER_CHOICES:
        value = getattr(args, name)
        if value:
            answers = answers.with_answer(name, value)
    return answers


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.interactive:
        try:
            controller = run_interactive(TerminalView())
        except (EOFError, KeyboardInterrupt):
            print("error: questionnaire aborted", file=sys.stderr)
            return 2
        answers = controller.state.answers
    else:
        try:
            answers = _collect_answers(args)
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        except ValueError as exc:
            print(f"error: invalid input: {exc}", file=sys.stderr)
            return 2

    try:
        assessment = assess(answers)
    except TalentRiskError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    payload = assessment.to_payload()
    if args.out:
        output_path = Path(args.out).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        dump_result_file(output_path, payload)

    if args.format == "json":
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif not args.interactive:
        TerminalView().render_results(assessment.result, assessment.interpretation, assessment.heatmap_rows)

    if args.out:
        print(f"wrote={Path(args.out).resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
