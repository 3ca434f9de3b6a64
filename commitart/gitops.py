"""
Thin wrappers around the git command line.

Every call takes an explicit working directory; nothing here changes the
process's current directory.
"""

import os
import shutil
import subprocess
from pathlib import Path

from .errors import ExternalOperationFailure, MissingIdentity

GIT = "git"
DEFAULT_BRANCH = "main"
GIT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def run(cmd, cwd=None, env=None) -> str:
    try:
        res = subprocess.run(
            cmd, cwd=cwd, env=env,
            stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True,
        )
    except OSError as e:
        raise ExternalOperationFailure(cmd, str(e)) from e
    if res.returncode != 0:
        raise ExternalOperationFailure(cmd, res.stdout)
    return res.stdout


def git_available() -> bool:
    return shutil.which(GIT) is not None


def read_config(key, scope="global", cwd=None):
    """
    Return a git config value, or None when it is unset or empty.

    With `scope=None` git resolves the value across system, global and
    local config the same way a commit would.
    """
    cmd = [GIT, "config"] + ([f"--{scope}"] if scope else []) + ["--get", key]
    res = subprocess.run(cmd, cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True)
    # `git config --get` exits 1 for a missing key, anything else is a real failure.
    if res.returncode == 1:
        return None
    if res.returncode != 0:
        raise ExternalOperationFailure(cmd)
    return res.stdout.strip() or None


def write_config(key, value, cwd):
    run([GIT, "config", key, value], cwd=cwd)


def email_looks_valid(email) -> bool:
    return bool(email) and "@" in email and len(email) > 5


def resolve_identity(cwd=None):
    """
    Find the author identity commits will be made with.

    Reads the effective configuration (system, global and, inside a
    repository, local settings). Raises MissingIdentity when either the
    name or a usable email is absent.
    """
    if not git_available():
        raise ExternalOperationFailure([GIT, "--version"], "git is not installed or not in PATH")
    name = read_config("user.name", None, cwd)
    email = read_config("user.email", None, cwd)
    missing = []
    if not name:
        missing.append("user.name")
    if not email_looks_valid(email):
        missing.append("user.email")
    if missing:
        raise MissingIdentity(missing)
    return name, email


def check_config():
    """Collect (ok, message) lines describing the global git setup."""
    report = []
    if not git_available():
        return False, [(False, "Git is not installed or not in PATH")]
    report.append((True, "Git is installed"))

    ok = True
    name = read_config("user.name")
    if name:
        report.append((True, f'Git user.name: "{name}"'))
    else:
        report.append((False, "Git user.name is not set"))
        ok = False

    email = read_config("user.email")
    if not email:
        report.append((False, "Git user.email is not set"))
        ok = False
    elif email_looks_valid(email):
        report.append((True, f'Git user.email: "{email}"'))
    else:
        report.append((False, f'Git user.email "{email}" does not look valid'))
        ok = False
    return ok, report


def init_commands(repo_path):
    """The initialization steps, as shown to the user before they run."""
    return [
        [GIT, "init", str(repo_path)],
        [GIT, "config", "user.name", "<name>"],
        [GIT, "config", "user.email", "<email>"],
        [GIT, "config", "init.defaultBranch", DEFAULT_BRANCH],
        [GIT, "add", "README.md"],
        [GIT, "commit", "-m", "Initial commit"],
        [GIT, "branch", "-M", DEFAULT_BRANCH],
    ]


def init_repository(repo_path, word, identity):
    repo = Path(repo_path)
    name, email = identity
    repo.mkdir(parents=True, exist_ok=True)
    run([GIT, "init", str(repo)])
    write_config("user.name", name, repo)
    write_config("user.email", email, repo)
    write_config("init.defaultBranch", DEFAULT_BRANCH, repo)
    (repo / "README.md").write_text(
        f"# {word} Contribution Pattern\n\nGenerated with commit-art\n", encoding="utf-8"
    )
    run([GIT, "add", "README.md"], cwd=repo)
    run([GIT, "commit", "-m", "Initial commit", "--quiet"], cwd=repo)
    run([GIT, "branch", "-M", DEFAULT_BRANCH], cwd=repo)
    return repo


def commit_command(message):
    return [GIT, "commit", "--allow-empty", "-m", message, "--quiet"]


def commit_empty(repo_root, when, message):
    stamp = when.strftime(GIT_DATE_FORMAT)
    env = os.environ.copy()
    env["GIT_AUTHOR_DATE"] = stamp
    env["GIT_COMMITTER_DATE"] = stamp
    run(commit_command(message), cwd=repo_root, env=env)
