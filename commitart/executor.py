"""Run a commit plan against a real repository (or pretend to)."""

from pathlib import Path

from . import gitops
from .errors import ExternalOperationFailure, InvalidInput
from .intensity import intensity_name


def execute_plan(plan, repo_root, dry_run=False, commit=None) -> int:
    """
    Create one empty commit per descriptor, in plan order.

    Stops at the first failing commit; commits already made are left in
    place and the raised error carries how many there were.
    """
    if dry_run:
        return plan.total
    commit = commit or gitops.commit_empty
    done = 0
    for descriptor in plan.descriptors:
        try:
            commit(repo_root, descriptor.when, descriptor.label)
        except ExternalOperationFailure as e:
            raise ExternalOperationFailure(e.command, e.output, completed=done) from e
        done += 1
    return done


def ensure_clean_target(repo):
    if repo.exists() and (not repo.is_dir() or any(repo.iterdir())):
        raise InvalidInput(f"{repo} already exists and is not an empty directory")


def summarize(plan, repo_path, commit_count):
    return {
        "word": plan.word,
        "start_date": plan.start,
        "end_date": plan.end,
        "commit_count": commit_count,
        "total_weeks": plan.weeks,
        "repo_path": str(repo_path),
        "intensity": intensity_name(plan.intensity),
        "autocorrected": plan.autocorrected,
    }


def create_repository(plan, repo_path, dry_run=False, commit=None):
    """
    Initialize a fresh repository at `repo_path` and replay `plan` into it.

    The author identity is resolved before anything touches the disk, so a
    missing identity never leaves a half-built repository behind.
    """
    repo = Path(repo_path)
    ensure_clean_target(repo)
    if dry_run:
        return summarize(plan, repo, execute_plan(plan, repo, dry_run=True))

    identity = gitops.resolve_identity()
    gitops.init_repository(repo, plan.word, identity)
    count = execute_plan(plan, repo, commit=commit)
    return summarize(plan, repo, count)
