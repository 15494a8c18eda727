"""
Reporting: plain-text renderers for the CLI.

Modules
-------
formatters : format_step(), format_assessment() and section formatters.
"""
