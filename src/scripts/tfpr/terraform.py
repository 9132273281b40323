#!/usr/bin/env python3
"""
terraform

Common code useful for a Terraform plan.

Everything that depends on the wording of the planner's output lives here,
behind summarize().

Example Usage:
    from tfpr import terraform
    from tfpr.terraform import plan, summarize
"""

import os
import shutil
import typing

from tfpr import loggy
from tfpr.common import subprocess_run as _run

ACTIONS_BANNER = "Terraform will perform the following actions:"
SUMMARY_PREFIX = "Plan:"


class PlanChanges(typing.NamedTuple):
    summary: str
    actions: str


def verify_terraform_installed(tf_bin: str = "terraform") -> bool:
    """
    verify_terraform_installed()

    Make sure the planner binary is on the PATH.

    Returns: True/False
    """
    terraform_path = shutil.which(tf_bin)
    if terraform_path:
        loggy.debug(f"terraform.verify_terraform_installed(): Found {tf_bin} at {terraform_path}")
        return True

    loggy.error(f"terraform.verify_terraform_installed(): {tf_bin} not found on PATH")
    return False


def get_terraform_path(tf_root: str, environment: str) -> str:
    return os.path.join(tf_root, environment)


def plan(tf_root: str, environment: str, tf_bin: str = "terraform") -> str:
    """
    plan()

    Runs `plan` against <tf_root>/<environment> without taking the state lock and with a forced refresh.
    A failing plan raises CalledProcessError.

    Returns: String with the combined stdout and stderr of the plan
    """
    _TARGET_DIR = get_terraform_path(tf_root, environment)
    loggy.info(f"terraform.plan(): Running with target: {_TARGET_DIR}")

    _process_output = _run(
        [tf_bin, f"-chdir={_TARGET_DIR}", "plan", "-lock=false", "-refresh=true", "-no-color"], tee=False)

    loggy.info(f"terraform.plan(): {tf_bin} returned {str(_process_output.returncode)}")
    return (_process_output.stdout or "") + (_process_output.stderr or "")


def extract_actions(plan_output: str) -> str:
    """
    extract_actions()

    The lines between the actions banner and the "Plan:" line, both excluded.
    Empty when the banner is missing, i.e. when there is nothing to change.
    """
    _lines = []
    _in_actions = False
    for line in plan_output.splitlines():
        if not _in_actions:
            if ACTIONS_BANNER in line:
                _in_actions = True
            continue
        if line.startswith(SUMMARY_PREFIX):
            break
        _lines.append(line)

    return "\n".join(_lines)


def extract_summary(plan_output: str) -> str:
    """
    extract_summary()

    The "Plan: X to add, Y to change, Z to destroy." line, unmodified. Empty if there is none.
    subprocess_tee already strips trailing whitespace from every captured line.
    """
    for line in plan_output.splitlines():
        if line.startswith(SUMMARY_PREFIX):
            return line
    return ""


def summarize(plan_output: str) -> PlanChanges:
    """
    summarize()

    Reduce raw plan output to the summary line and the actions section.
    """
    _changes = PlanChanges(summary=extract_summary(plan_output), actions=extract_actions(plan_output))
    if not _changes.summary:
        loggy.warning("terraform.summarize(): No 'Plan:' line found in the plan output")
    else:
        loggy.info(f"terraform.summarize(): {_changes.summary}")
    return _changes
