"""Developer task runner: ``python scripts.py <task>``."""

import subprocess
import sys

TASKS = {
    "test": ["pytest"],
    "lint": ["flake8", "--max-line-length", "120", "src", "tests"],
    "typecheck": ["mypy", "src"],
    "format": ["black", "src", "tests"],
    "coverage": ["pytest", "--cov=repo2html", "--cov-report=xml"],
}


def run(task: str) -> None:
    subprocess.run(TASKS[task], check=True)


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(f"Usage: python scripts.py {{{','.join(TASKS)}}}", file=sys.stderr)
        sys.exit(2)
    run(sys.argv[1])
