"""
tfpr

Helpers for opening pull requests that carry a terraform plan.

Example Usage:
    from tfpr import git, gh, terraform, report
"""
