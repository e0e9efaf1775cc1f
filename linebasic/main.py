"""
LineBASIC - line-numbered BASIC interpreter

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging

from . import config
from .basic import Session
from .basic import NAME, VERSION, COPYRIGHT
from .data import read_usage


def main(*arguments):
    """Initialise, parse arguments and perform requested operations."""
    # get settings and prepare logging
    settings = config.Settings(arguments or None)
    if settings.version:
        # print version and exit
        _show_version()
    elif settings.help:
        # print usage and exit
        _show_usage()
    else:
        return _run_program(settings)
    return 0


def _show_usage():
    """Show usage description."""
    sys.stdout.write(read_usage())

def _show_version():
    """Show version and copyright."""
    sys.stdout.write(u'%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))


def _run_program(settings):
    """Load and run a program, write its output to stdout."""
    prog = settings.program
    try:
        source = _read_program(prog)
    except EnvironmentError as e:
        logging.error(u'Could not read program `%s`: %s', prog, e)
        return 1
    with Session(**settings.session_params) as session:
        sys.stdout.write(session.execute(source))
    return 0

def _read_program(prog):
    """Read program source text from a file or from standard input."""
    if not prog:
        return sys.stdin.read()
    with io.open(prog, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()
