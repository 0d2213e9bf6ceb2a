"""
picklist_advisor.reporting — Formatting and file export of advisor output.

This package only presents results the analysis engine already produced.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — JSON/CSV report writers.
"""
