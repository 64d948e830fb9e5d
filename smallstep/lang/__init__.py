"""Everything around the reduction engine that a person interacts with: error reporting, traces, bundled example
programs and the interactive shell.
"""
