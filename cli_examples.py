#!/usr/bin/env python3
"""
Examples of using the lifeverse CLI for different scenarios.
"""

import subprocess


def run_cli_command(args):
    """Run a CLI command and capture its output."""
    cmd = ["lifeverse-cli"] + args
    print(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=10)
        print(result.stdout)
        if result.stderr:
            print(f"Stderr: {result.stderr}")
        print("-" * 50)
        return result.returncode == 0
    except subprocess.TimeoutExpired:
        print("Command timed out")
        return False


def main():
    """Run various CLI examples."""
    print("Lifeverse CLI Examples")
    print("=" * 50)

    examples = [
        (["--list-patterns"], "List all available patterns"),
        ([], "First generation of the default 64x64 universe"),
        (["--generations", "3", "--delay", "0", "--verbose"], "Three generations of the default universe"),
        (["--pattern", "Block", "-W", "10", "-H", "10", "-g", "2", "--ascii"], "Still life pattern (should be stable)"),
        (["--pattern", "Blinker", "-W", "7", "-H", "7", "-g", "3", "--ascii"], "Oscillating blinker pattern"),
        (["--pattern", "Glider", "-W", "8", "-H", "8", "-g", "32", "-d", "0", "--ascii"], "Glider crossing the edges"),
    ]

    success_count = 0
    for args, description in examples:
        print(f"\nExample: {description}")
        print("-" * len(f"Example: {description}"))
        if run_cli_command(args):
            success_count += 1
        else:
            print("❌ Failed")

    print(f"\nSummary: {success_count}/{len(examples)} examples completed successfully")


if __name__ == "__main__":
    main()
