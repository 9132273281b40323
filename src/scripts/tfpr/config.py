#!/usr/bin/env python3
"""
config

Run configuration gathered from the environment.

Example Usage:
    from tfpr.config import Config
    config = Config.from_environ()
"""
import typing
from dataclasses import dataclass

from tfpr.common import get_environ

DEFAULT_BASE_BRANCH = "main"
DEFAULT_TF_ROOT = "terraform"
DEFAULT_TF_BIN = "terraform"
DEFAULT_ENVIRONMENT = "production"


@dataclass(frozen=True)
class Config:
    base_branch: str = DEFAULT_BASE_BRANCH
    tf_root: str = DEFAULT_TF_ROOT
    tf_bin: str = DEFAULT_TF_BIN
    # None means "ask gh for the current repository" when it is first needed
    repo: typing.Optional[str] = None

    @classmethod
    def from_environ(cls, environ: typing.Optional[typing.Mapping[str, str]] = None) -> "Config":
        """
        Config.from_environ()

        Read BASE_BRANCH, TF_ROOT, TF_BIN and GH_REPO. Empty values fall back to the defaults.
        """
        return cls(
            base_branch=get_environ('BASE_BRANCH', DEFAULT_BASE_BRANCH, environ=environ),
            tf_root=get_environ('TF_ROOT', DEFAULT_TF_ROOT, environ=environ),
            tf_bin=get_environ('TF_BIN', DEFAULT_TF_BIN, environ=environ),
            repo=get_environ('GH_REPO', environ=environ),
        )
