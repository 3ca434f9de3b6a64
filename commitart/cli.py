#!/usr/bin/env python3
"""
Draw a word on your contribution graph with backdated empty commits.

What it does:
- Renders a word with a 5x7 pixel font into a 7 x N grid (weekdays x weeks).
- Anchors the grid on a Sunday and maps every lit pixel to a calendar day.
- Creates a fresh repository and fills those days with empty commits.

Safety notes:
- It commits a lot. Use dry-run (or DRY_RUN=1) first to preview counts.
- Commits are chronological to keep history clean.

Usage:
  commit-art dry-run HELLO
  commit-art dry-run HELLO 2024-01-07 3 --png hello.png
  commit-art create HELLO 2024 ./hello-pattern 4
  DRY_RUN=1 commit-art create HELLO ./hello-pattern
"""

import argparse
import os
import random
import sys
from datetime import date
from pathlib import Path

from .dates import (
    DATE_PATTERN,
    YEAR_PATTERN,
    compute_optimal_anchor,
    next_anchor_weekday,
    parse_date,
    parse_year,
)
from .errors import CommitArtError, InvalidInput
from .executor import create_repository, ensure_clean_target
from .gitops import check_config, init_commands
from .intensity import DEFAULT_INTENSITY, intensity_name
from .matrix import build_matrix
from .planner import plan_word
from .preview import print_plan, render_heatmap

SEED_ENV = "COMMIT_ART_SEED"

NOTES = """\
Date options:
  YYYY-MM-DD   start on that week (moved back to the previous Sunday)
  YYYY         center the word inside that year
  omitted      center the word inside the current year

Intensity levels:
  1 - Light green (2-3 commits/day)
  2 - Medium green (4-7 commits/day), default
  3 - Dark green (10-15 commits/day)
  4 - Random mix (4-19 commits/day), natural look

Environment:
  DRY_RUN            make `create` preview only
  COMMIT_ART_SEED    seed for commit counts and times

This WILL modify your public contribution graph once pushed.
Consider a private repository while experimenting.
"""


# ---------- argument helpers ----------

def parse_intensity(text) -> int:
    try:
        return int(text)
    except (TypeError, ValueError):
        return DEFAULT_INTENSITY


def classify_arguments(command, rest):
    """
    Sort the positionals after the word into (start, year, path, intensity).

    The first one is a start date if it looks like YYYY-MM-DD, a year if it
    is four digits, and otherwise the path (create) or intensity (dry-run).
    """
    rest = list(rest)
    start = year = path = None
    if rest and DATE_PATTERN.match(rest[0]):
        start = parse_date(rest.pop(0))
    elif rest and YEAR_PATTERN.match(rest[0]):
        year = parse_year(rest.pop(0))

    if command == "create":
        if not rest:
            raise InvalidInput("create requires a repository path")
        path = rest.pop(0)

    intensity = parse_intensity(rest.pop(0)) if rest else DEFAULT_INTENSITY
    if rest:
        raise InvalidInput(f"Unexpected arguments: {' '.join(rest)}")
    return start, year, path, intensity


def resolve_start(word, start, year):
    # Bad letters and over-wide words fail here, before any date math.
    build_matrix(word)
    if start is not None:
        return start, False
    return compute_optimal_anchor(word, year), True


def make_rng(seed):
    if seed is None:
        env = os.environ.get(SEED_ENV)
        if env:
            try:
                seed = int(env)
            except ValueError:
                raise InvalidInput(f"{SEED_ENV} must be an integer, got '{env}'") from None
    return random.Random(seed)


def confirm(prompt="Do you want to proceed? (y/N): ") -> bool:
    try:
        answer = input(prompt)
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def build_parser():
    ap = argparse.ArgumentParser(
        prog="commit-art",
        description="Draw a word on the contribution graph with backdated empty commits.",
        epilog=NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = ap.add_subparsers(dest="command")

    create = sub.add_parser("create", help="create a repository with the commits (asks first)")
    create.add_argument("word")
    create.add_argument("args", nargs="+", metavar="[date|year] path [intensity]")
    create.add_argument("-y", "--yes", action="store_true", help="do not ask for confirmation")

    dry = sub.add_parser("dry-run", help="preview the commits without running git")
    dry.add_argument("word")
    dry.add_argument("args", nargs="*", metavar="[date|year] [intensity]")

    for p in (create, dry):
        p.add_argument("--png", metavar="PATH", help="also save the heatmap preview as an image")
        p.add_argument("--seed", type=int, default=None, help="seed commit counts and times")

    sub.add_parser("next-anchor-weekday", aliases=["next-sunday"], help="show the next Sunday")
    sub.add_parser("check-config", help="check the git identity used for commits")
    sub.add_parser("help", help="show this help")
    return ap


# ---------- commands ----------

def cmd_dry_run(args):
    start, year, _, intensity = classify_arguments("dry-run", args.args)
    start, auto = resolve_start(args.word, start, year)
    if auto:
        print(f"Using automatic date: {start:%a %b %d %Y} (centered in {start.year})")
    plan = plan_word(args.word, start, intensity, make_rng(args.seed))
    print_plan(plan)
    if args.png:
        render_heatmap(plan, args.png)
        print(f"Heatmap preview saved to {args.png}")
    print(f"\nDry run completed. {plan.total} commits would be created.")
    return 0


def print_next_steps(path):
    print("\nNext steps:")
    print(f"  cd {path}")
    print("  # PUBLIC repository (affects your contribution graph):")
    print("  git remote add origin https://github.com/<you>/<repo>.git")
    print("  git push -u origin main")
    print("  # PRIVATE repository (safe experimentation):")
    print("  gh repo create <repo> --private --source=. --push")


def cmd_create(args):
    start, year, path, intensity = classify_arguments("create", args.args)
    ensure_clean_target(Path(path))
    start, auto = resolve_start(args.word, start, year)
    plan = plan_word(args.word, start, intensity, make_rng(args.seed))

    print(f'Creating repository for "{plan.word}" at {path}')
    if auto:
        print(f"Using automatic date: {start:%a %b %d %Y} (centered in {start.year})")
    print(f"Intensity: {intensity} ({intensity_name(intensity)})")
    print("Repository initialization commands:")
    for cmd in init_commands(path):
        print("  " + " ".join(cmd))
    print("Preview of commits to be created:")
    print("-" * 50)
    print_plan(plan)
    print("-" * 50)
    print(f"Total commits: {plan.total}")
    print(f"Repository path: {path}")
    if args.png:
        render_heatmap(plan, args.png)
        print(f"Heatmap preview saved to {args.png}")
    print("\nIMPORTANT: This will modify your contribution graph once pushed!")

    if os.environ.get("DRY_RUN") is not None:
        print(f"[DRY-RUN] Total would commit: {plan.total}")
        return 0

    if not args.yes and not confirm():
        print("Operation cancelled.")
        return 0

    result = create_repository(plan, path)
    print("\nRepository created successfully!")
    print(f"Location: {result['repo_path']}")
    print(f"Commits: {result['commit_count']} for \"{result['word']}\"")
    print(f"Intensity: {result['intensity']}")
    print(f"Date range: {result['start_date']:%a %b %d %Y} to {result['end_date']:%a %b %d %Y}")
    print_next_steps(path)
    return 0


def cmd_next_anchor_weekday(args):
    nxt = next_anchor_weekday(date.today())
    print(f"Next Sunday: {nxt.isoformat()} ({nxt:%a %b %d %Y})")
    return 0


def cmd_check_config(args):
    print("Checking Git configuration for contributions...\n")
    ok, report = check_config()
    for passed, message in report:
        print(("[ok]   " if passed else "[fail] ") + message)
    print()
    if ok:
        print("Git is properly configured. Make sure this email is added to your GitHub account.")
        return 0
    print("Please configure Git before creating contributions:")
    print('  git config --global user.name "Your Name"')
    print('  git config --global user.email "your-email@example.com"')
    return 1


COMMANDS = {
    "create": cmd_create,
    "dry-run": cmd_dry_run,
    "next-anchor-weekday": cmd_next_anchor_weekday,
    "next-sunday": cmd_next_anchor_weekday,
    "check-config": cmd_check_config,
}


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.command in (None, "help"):
        ap.print_help()
        return 0

    try:
        return COMMANDS[args.command](args)
    except CommitArtError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
