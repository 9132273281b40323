#!/usr/bin/env python3
"""
terraform_pr

Open a pull request with a terraform plan in its body.

Checks that the current branch changes infrastructure files compared to the base branch,
runs a plan for one environment and either prints the report (--show) or, after a
confirmation, pushes the branch if GitHub does not know it yet and creates the pull request.

Environment:
    BASE_BRANCH  branch the pull request merges into (main)
    TF_ROOT      directory holding one terraform directory per environment (terraform)
    GH_REPO      owner/name of the GitHub repository (asks gh)
    TF_BIN       terraform compatible binary to plan with (terraform)
"""
import subprocess
import sys
import typing

import click

from tfpr import gh, git, loggy, report, terraform
from tfpr.config import Config, DEFAULT_ENVIRONMENT

EXIT_FAILURE = 1
EXIT_NOT_FOUND = 127


def confirm(branch: str, base: str) -> bool:
    """
    confirm()

    Ask once. Only y or Y counts as a yes, an empty answer is a no.
    """
    answer = click.prompt(
        f"Create a pull request from {branch} into {base}? [y/N]",
        default="",
        show_default=False,
        prompt_suffix=" ",
    )
    return answer in ("y", "Y")


def run(config: Config, environment: str = DEFAULT_ENVIRONMENT, show: bool = False,
        title: typing.Optional[str] = None, draft: bool = False) -> int:
    """
    run()

    Plan `environment` and open (or, with show, just print) the pull request.

    Returns: Integer exit status
    """
    loggy.info("terraform_pr(): BEGIN")

    context = git.resolve_context()
    if context is None:
        return EXIT_FAILURE

    if not git.changes_by_suffix(f"{context.remote}/{config.base_branch}"):
        loggy.warning(
            f"terraform_pr(): No .tf or .yml changes between {context.branch} and "
            f"{context.remote}/{config.base_branch}. Nothing to plan.")
        return EXIT_FAILURE

    if not terraform.verify_terraform_installed(config.tf_bin):
        return EXIT_NOT_FOUND

    plan_output = terraform.plan(config.tf_root, environment, tf_bin=config.tf_bin)
    changes = terraform.summarize(plan_output)
    body = report.render(changes.summary, changes.actions)

    click.echo(body)

    if show:
        loggy.info("terraform_pr(): Show only, not creating a pull request")
        return 0

    if not confirm(context.branch, config.base_branch):
        loggy.warning("terraform_pr(): Aborted, no pull request created")
        return 0

    repo = config.repo or gh.repo_name_with_owner()
    if not gh.branch_compare_exists(repo, config.base_branch, context.branch):
        git.push(context.remote, context.branch)

    body_file = report.write_report(body)
    url = gh.pr_create(
        repo,
        config.base_branch,
        context.branch,
        title=title or git.last_commit_subject(),
        body_file=body_file,
        draft=draft,
    )
    loggy.info(f"terraform_pr(): Pull request created {url}")
    return 0


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-e", "--environment", default=DEFAULT_ENVIRONMENT, show_default=True,
              help="Environment directory under TF_ROOT to plan.")
@click.option("-s", "--show", is_flag=True, help="Only print the plan report, do not open a pull request.")
@click.option("-t", "--title", default=None, help="Pull request title. Defaults to the last commit subject.")
@click.option("-d", "--draft", is_flag=True, help="Open the pull request as a draft.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
def main(environment, show, title, draft, verbose):
    """Open a pull request containing a terraform plan for review."""
    loggy.set_verbose(verbose)

    try:
        _exit = run(Config.from_environ(), environment=environment, show=show, title=title, draft=draft)
    except subprocess.CalledProcessError as e:
        loggy.error(f"terraform_pr(): {e.cmd} failed with exit status {e.returncode}")
        sys.exit(e.returncode)

    sys.exit(_exit)


if __name__ == "__main__":
    main()
