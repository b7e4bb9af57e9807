"""Development script to format, lint and test the project."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\nFailed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks."""
    parser = argparse.ArgumentParser(description="Run development checks.")
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Only verify formatting and lint results, never rewrite files",
    )
    parser.add_argument(
        "--min-coverage",
        type=int,
        default=90,
        help="Fail when line coverage of api_surface drops below this percentage",
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["ruff", "format", "--check"], "Ruff Format Check")
        run_command(["ruff", "check"], "Ruff Linting")
    else:
        run_command(["ruff", "format"], "Ruff Formatting")
        run_command(["ruff", "check", "--fix"], "Ruff Linting & Fixes")

    run_command(
        [
            sys.executable,
            "-m",
            "pytest",
            "--cov=api_surface",
            "--cov-report=term-missing",
            f"--cov-fail-under={args.min_coverage}",
        ],
        "Tests",
    )

    print("\nAll development checks passed successfully.")


if __name__ == "__main__":
    main()
