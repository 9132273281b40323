#!/usr/bin/env python3
"""
git.py

Common code useful for interacting with git.

Example Usage:
    from tfpr import git
    from tfpr.git import resolve_context
"""
import typing

from tfpr import loggy
from tfpr.common import subprocess_run as _run

INFRA_SUFFIXES = (".tf", ".yml")


class Context(typing.NamedTuple):
    branch: str
    remote: str


def current_branch() -> str:
    """
    git.current_branch()

    Name of the checked out branch
    """
    o = _run(["git", "rev-parse", "--abbrev-ref", "HEAD"], tee=False)
    return o.stdout.strip()


def branch_remote(branch: str) -> typing.Optional[str]:
    """
    git.branch_remote()

    The remote of the branch's configured upstream, or None when the branch does not track anything.
    """
    o = _run(["git", "config", "--get", f"branch.{branch}.remote"], tee=False, check=False)
    if o.returncode == 0 and o.stdout.strip():
        return o.stdout.strip()
    return None


def remotes() -> typing.List[str]:
    o = _run(["git", "remote"], tee=False)
    return [line.strip() for line in o.stdout.splitlines() if line.strip()]


def first_push_remote() -> typing.Optional[str]:
    """
    git.first_push_remote()

    Name of the first remote listed with a (push) url in `git remote -v`.
    """
    o = _run(["git", "remote", "-v"], tee=False)
    for line in o.stdout.splitlines():
        if line.rstrip().endswith("(push)"):
            return line.split()[0]
    return None


def resolve_remote(branch: str) -> typing.Optional[str]:
    """
    git.resolve_remote()

    Pick the remote to compare against and push to:

    * the remote of the branch's upstream, if one is configured
    * the only remote, if exactly one exists
    * otherwise the first remote with a push url

    Returns: String or None if the repository has no remotes
    """
    _remote = branch_remote(branch)
    if _remote:
        loggy.debug(f"git.resolve_remote(): Using upstream remote {_remote}")
        return _remote

    _remotes = remotes()
    if len(_remotes) == 1:
        loggy.debug(f"git.resolve_remote(): Using the only remote {_remotes[0]}")
        return _remotes[0]

    _remote = first_push_remote()
    if _remote:
        loggy.debug(f"git.resolve_remote(): Using first push remote {_remote}")
    return _remote


def resolve_context() -> typing.Optional[Context]:
    """
    git.resolve_context()

    Resolve the current branch and the remote it belongs to.

    Returns: Context or None if no remote could be found
    """
    branch = current_branch()
    remote = resolve_remote(branch)
    if not remote:
        loggy.error(f"git.resolve_context(): No git remote found for branch {branch}")
        return None

    loggy.info(f"git.resolve_context(): Branch {branch} on remote {remote}")
    return Context(branch=branch, remote=remote)


def changes_by_suffix(ref: str, suffixes: typing.Sequence[str] = INFRA_SUFFIXES) -> typing.List[str]:
    """
    git.changes_by_suffix()

    Files that differ between `ref` and HEAD whose names end in one of `suffixes`.

    ref: String - commit or remote branch to compare against, i.e. origin/main
    suffixes: Sequence of file name endings, defaults to .tf and .yml

    Examples: git.changes_by_suffix("origin/main")
              git.changes_by_suffix("origin/main", suffixes=(".tf",))
    """
    loggy.info(f"git.changes_by_suffix(): Checking for changes from ({ref}) to checked out commit.")

    o = _run(["git", "diff", "--name-only", ref, "HEAD"], tee=False)
    loggy.debug(f"git.changes_by_suffix(): Changed files list: \n{o.stdout}")

    _changed = [line.strip() for line in o.stdout.splitlines() if line.strip().endswith(tuple(suffixes))]
    for line in _changed:
        loggy.info(f"git.changes_by_suffix(): Change in infrastructure file found. {line}")

    if not _changed:
        loggy.info("git.changes_by_suffix(): No changes to infrastructure files found.")
    return _changed


def push(remote: str, branch: str):
    """
    git.push()

    Push the branch and set its upstream
    """
    loggy.info(f"git.push(): Pushing {branch} to {remote}")
    _run(["git", "push", "--set-upstream", remote, branch])


def last_commit_subject() -> str:
    o = _run(["git", "log", "-1", "--pretty=%s"], tee=False)
    return o.stdout.strip()
