#!/usr/bin/env python3
"""
Quality gates for lknic.

Each gate is one command run from the project root. Required gates decide
the exit status; optional gates only report.

Usage:
    python scripts/quality_gates.py
    python scripts/quality_gates.py --only tests regression
    python scripts/quality_gates.py --skip format --out artifacts/gates.json
"""

from __future__ import annotations

import argparse
import datetime
import json
import subprocess
import sys
import time
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_REPORT = PROJECT_ROOT / "artifacts" / "quality_gates.json"

PYTEST = [sys.executable, "-m", "pytest", "-q"]


@dataclass(frozen=True)
class Gate:
    name: str
    command: list[str]
    required: bool = True
    timeout_seconds: int = 300


GATES: list[Gate] = [
    Gate("rules", [*PYTEST, "tests/unit/test_rules.py"]),
    Gate("lint", [sys.executable, "-m", "ruff", "check", "."]),
    Gate("format", [sys.executable, "-m", "ruff", "format", "--check", "."], required=False),
    Gate("types", [sys.executable, "-m", "mypy"]),
    Gate("calendar", [*PYTEST, "tests/unit/test_calendar.py", "tests/unit/test_time.py"]),
    Gate("regression", [*PYTEST, "tests/regression"]),
    Gate("tests", PYTEST, timeout_seconds=600),
]


@dataclass(frozen=True)
class GateOutcome:
    name: str
    status: str  # "pass" | "fail" | "warn"
    exit_code: int
    duration_seconds: float
    output: str = ""


def run_gate(gate: Gate, cwd: Path = PROJECT_ROOT) -> GateOutcome:
    """Run one gate; a timeout or launch failure counts as exit code -1."""
    start = time.monotonic()
    try:
        proc = subprocess.run(
            gate.command,
            capture_output=True,
            text=True,
            timeout=gate.timeout_seconds,
            cwd=cwd,
        )
        exit_code, output = proc.returncode, proc.stdout + proc.stderr
    except subprocess.TimeoutExpired:
        exit_code, output = -1, f"timed out after {gate.timeout_seconds}s"
    except OSError as e:
        exit_code, output = -1, str(e)

    if exit_code == 0:
        status = "pass"
    elif gate.required:
        status = "fail"
    else:
        status = "warn"

    return GateOutcome(
        name=gate.name,
        status=status,
        exit_code=exit_code,
        duration_seconds=round(time.monotonic() - start, 2),
        output=output,
    )


def select_gates(
    gates: Iterable[Gate],
    only: Iterable[str] | None = None,
    skip: Iterable[str] = (),
) -> list[Gate]:
    """Filter gates by name, keeping their declared order."""
    wanted = set(only) if only else None
    skipped = set(skip)
    return [
        g for g in gates if (wanted is None or g.name in wanted) and g.name not in skipped
    ]


def passed(outcomes: Iterable[GateOutcome]) -> bool:
    return all(o.status != "fail" for o in outcomes)


def write_report(outcomes: list[GateOutcome], path: Path) -> None:
    """Write outcomes as JSON, without captured output for passing gates."""
    path.parent.mkdir(parents=True, exist_ok=True)
    report = {
        "timestamp_utc": datetime.datetime.now(datetime.UTC).isoformat(),
        "status": "pass" if passed(outcomes) else "fail",
        "gates": [
            {**asdict(o), "output": o.output if o.status != "pass" else ""} for o in outcomes
        ],
    }
    path.write_text(json.dumps(report, indent=2), encoding="utf-8")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run lknic quality gates.")
    parser.add_argument("--only", nargs="*", help="Run only these gates")
    parser.add_argument("--skip", nargs="*", default=[], help="Gates to skip")
    parser.add_argument("--list", action="store_true", help="List gates and exit")
    parser.add_argument("--out", type=Path, default=DEFAULT_REPORT, help="JSON report path")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.list:
        for gate in GATES:
            print(f"{gate.name}{'' if gate.required else ' (optional)'}")
        return 0

    gates = select_gates(GATES, only=args.only, skip=args.skip)
    if not gates:
        print(f"No gates match: {args.only}")
        return 1

    outcomes = []
    for gate in gates:
        outcome = run_gate(gate)
        print(f"[{outcome.status.upper():4}] {gate.name} ({outcome.duration_seconds:.1f}s)")
        outcomes.append(outcome)

    write_report(outcomes, args.out)
    print(f"Report: {args.out}")
    return 0 if passed(outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
