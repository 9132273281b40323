#!/usr/bin/env python3
"""
common

Common functions

Example Usage:
    from tfpr import common
"""
import os
import typing
import subprocess
from subprocess_tee import run
from shlex import join  # type: ignore

from tfpr import loggy

if typing.TYPE_CHECKING:
    CompletedProcess = subprocess.CompletedProcess[typing.Any]  # pylint: disable=E1136
else:
    CompletedProcess = subprocess.CompletedProcess


def get_environ(variable: str, default: typing.Optional[str] = None, environ: typing.Optional[typing.Mapping[str, str]] = None) -> str:
    """
    get_environ()

    This handles getting environnent variables better than the standard os.environ.get()
    There's a case where the ENV var could exist but it is empty, thus it should return the default val.

    environ: (Optional) Mapping to read from instead of os.environ

    Returns: String
    """
    _VAL = (os.environ if environ is None else environ).get(variable, default)
    if not _VAL:
        return default
    return _VAL


def subprocess_run(args: typing.Union[str, typing.List[str]], **kwargs: typing.Any) -> CompletedProcess:
    """
    subprocess_run():

    Replace the default subprocess_tee.run with check=True as default.
    Output is always captured; pass tee=False to keep it off the terminal.
    stdout and stderr are always strings, empty when the command printed nothing.

    * Usage: common.subprocess_run(["git", "push", "origin", "main"])
    """

    if isinstance(args, str):
        cmd = args
    else:
        # subprocess_tee runs everything through create_subprocess_shell,
        # so a list has to be quoted into a single string
        cmd = join(args)

    my_kwargs = kwargs.copy()
    my_kwargs['check'] = kwargs.get("check", True)
    loggy.debug(f"common.subprocess_run(): {cmd}")

    try:
        _process_output = run(cmd, **my_kwargs)
    except subprocess.CalledProcessError as e:
        loggy.error(f"common.subprocess_run(): Error: {str(e)}")
        if e.stderr:
            loggy.error(f"common.subprocess_run(): Process STDERR: {e.stderr}")

        raise

    # subprocess_tee hands back None instead of "" for silent commands when check is on
    _process_output.stdout = _process_output.stdout or ""
    _process_output.stderr = _process_output.stderr or ""
    return _process_output
