"""
Interface package: front ends for the Super Checkers engine.

Modules:
    cli — Line-oriented text protocol handler.
          Reads commands from stdin, writes replies to stdout.
          Can be run as a module: python -m interface.cli
"""
