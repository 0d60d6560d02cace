"""High level helpers for rule table handling."""

from .checker import PermitCheck, check_permits, get_rule_table, resolve_selection

__all__ = ["PermitCheck", "check_permits", "get_rule_table", "resolve_selection"]
