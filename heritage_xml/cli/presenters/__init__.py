"""Presenters for CLI output formatting."""

from .issues import IssuesPresenter

__all__ = ["IssuesPresenter"]
