#!/usr/bin/env python3
"""
gh.py

Common code useful for talking to GitHub through the `gh` cli.

Example Usage:
    from tfpr import gh
    from tfpr.gh import pr_create
"""
import typing

from tfpr import loggy
from tfpr.common import subprocess_run as _run


def repo_name_with_owner() -> str:
    """
    gh.repo_name_with_owner()

    The owner/name of the repository gh resolves for the working directory.
    """
    o = _run(["gh", "repo", "view", "--json", "nameWithOwner", "-q", ".nameWithOwner"], tee=False)
    _repo = o.stdout.strip()
    loggy.info(f"gh.repo_name_with_owner(): Repository {_repo}")
    return _repo


def branch_compare_exists(repo: str, base: str, branch: str) -> bool:
    """
    gh.branch_compare_exists()

    Ask the compare API for base...branch. A failure means the branch is not on GitHub yet.

    Returns: True/False
    """
    o = _run(["gh", "api", f"repos/{repo}/compare/{base}...{branch}"], tee=False, check=False)
    if o.returncode != 0:
        loggy.info(f"gh.branch_compare_exists(): {branch} can not be compared to {base} on {repo}")
        loggy.debug(f"gh.branch_compare_exists(): {o.stderr}")
        return False
    return True


def pr_create(repo: str, base: str, branch: str, title: str, body_file: str, draft: typing.Optional[bool] = False) -> str:
    """
    gh.pr_create()

    Open a pull request from branch into base with the body read from body_file

    Returns: String with whatever gh printed, normally the PR url
    """
    loggy.info(f"gh.pr_create(): Creating pull request {branch} -> {base} on {repo}")
    cmd = ["gh", "pr", "create", "--repo", repo, "--base", base, "--head", branch,
           "--title", title, "--body-file", body_file]
    if draft:
        cmd.append("--draft")

    o = _run(cmd)
    return o.stdout.strip()
