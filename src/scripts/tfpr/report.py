#!/usr/bin/env python3
"""
report

Build the pull request body for a plan.

Example Usage:
    from tfpr import report
    body = report.render(summary, actions)
"""
import tempfile

from tfpr import loggy

TEMPLATE = "<details><summary>{summary}</summary>\n\n```hcl\n{actions}\n```\n\n</details>\n"


def render(summary: str, actions: str) -> str:
    """
    render()

    Collapsible block labelled with the summary line, the actions inside an hcl code fence.
    """
    return TEMPLATE.format(summary=summary, actions=actions)


def write_report(body: str) -> str:
    """
    write_report()

    Save the body to a temp file that outlives the run so gh can read it.

    Returns: String path of the file
    """
    with tempfile.NamedTemporaryFile("w", prefix="tfpr-", suffix=".md", delete=False) as file:
        file.write(body)

    loggy.debug(f"report.write_report(): Report written to {file.name}")
    return file.name
