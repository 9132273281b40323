"""Shared fixtures: a fake command runner standing in for git, gh and terraform."""

import shlex
import subprocess

import pytest

from tfpr import common, terraform

PLAN_OUTPUT = """aws_s3_bucket.logs: Refreshing state... [id=acme-logs]

Terraform used the selected providers to generate the following execution
plan. Resource actions are indicated with the following symbols:
  + create
  ~ update in-place

Terraform will perform the following actions:

  # aws_s3_bucket.assets will be created
  + resource "aws_s3_bucket" "assets" {
      + bucket = "acme-assets"
    }

Plan: 1 to add, 0 to change, 0 to destroy.
"""

PLAN_ACTIONS = """
  # aws_s3_bucket.assets will be created
  + resource "aws_s3_bucket" "assets" {
      + bucket = "acme-assets"
    }
"""

PLAN_SUMMARY = "Plan: 1 to add, 0 to change, 0 to destroy."


class FakeRun:
    """Stands in for subprocess_tee.run: records commands and answers them from canned responses matched by prefix.

    Like subprocess_tee, empty output comes back as None when check is on.
    """

    def __init__(self):
        self.responses = []
        self.calls = []

    def add(self, prefix, stdout="", returncode=0, stderr=""):
        self.responses.append((tuple(prefix), returncode, stdout, stderr))
        return self

    def __call__(self, cmd, **kwargs):
        args = shlex.split(cmd)
        self.calls.append(args)
        check = kwargs.get("check", False)
        for prefix, returncode, stdout, stderr in self.responses:
            if tuple(args[: len(prefix)]) == prefix:
                if check and returncode != 0:
                    raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
                if check:
                    stdout, stderr = stdout or None, stderr or None
                return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)
        raise AssertionError(f"unexpected command: {args}")

    def ran(self, *prefix):
        return any(tuple(call[: len(prefix)]) == prefix for call in self.calls)


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(common, "run", fake)
    return fake


@pytest.fixture
def terraform_installed(monkeypatch):
    monkeypatch.setattr(terraform.shutil, "which", lambda name: f"/usr/local/bin/{name}")


@pytest.fixture
def feature_repo(fake_run, terraform_installed):
    """A branch tracking origin that changes a .tf file, with a plan ready."""
    (
        fake_run.add(["git", "rev-parse", "--abbrev-ref", "HEAD"], stdout="feature/buckets\n")
        .add(["git", "config", "--get", "branch.feature/buckets.remote"], stdout="origin\n")
        .add(["git", "diff", "--name-only"], stdout="terraform/production/s3.tf\nREADME.md\n")
        .add(["git", "log", "-1"], stdout="Add assets bucket\n")
        .add(["git", "push"], stdout="")
        .add(["terraform"], stdout=PLAN_OUTPUT)
        .add(["gh", "repo", "view"], stdout="acme/infra\n")
        .add(["gh", "pr", "create"], stdout="https://github.com/acme/infra/pull/7\n")
    )
    return fake_run
