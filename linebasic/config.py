"""
LineBASIC - config.py
Configuration file and command-line options parser

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import io
import os
import sys
import logging
import configparser
from collections import deque

from .basic.interpreter import MAX_STEPS
from .basic.program import LABEL_MATCHERS


# default config file name
CONFIG_NAME = u'LINEBASIC.INI'

# config file section with default settings
SECTION = u'linebasic'

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

# number of positional arguments
NUM_POSITIONAL = 1

# short-form arguments with and without a fixed value
SHORT_ARGS = {
    u'd': (u'debug', u'True'),
    u'h': (u'help', u'True'),
    u'v': (u'version', u'True'),
    u'l': (u'logfile', None),
}

# all long-form arguments
ARGUMENTS = {
    u'max-steps': {
        u'type': u'int', u'default': MAX_STEPS,
        u'check': lambda _n: _n >= 0,
    },
    u'label-match': {
        u'type': u'string', u'default': u'prefix',
        u'choices': tuple(sorted(LABEL_MATCHERS)),
    },
    u'config': {u'type': u'string', u'default': u''},
    u'logfile': {u'type': u'string', u'default': u''},
    u'debug': {u'type': u'bool', u'default': False},
    u'version': {u'type': u'bool', u'default': False},
    u'help': {u'type': u'bool', u'default': False},
}

TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')


##########################################################################
# logging

class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Set up the global logger temporarily until we know the log stream."""
        # route warnings through the log as well
        logging.captureWarnings(True)
        # get the root logger
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        # send to a buffer until we know where to log to
        self._logstream = io.StringIO()
        handler = logging.StreamHandler(self._logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Reset root logger."""
        root_logger = logging.getLogger()
        # remove all old handlers: temporary ones we set as well as any default ones
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Set up the global logger."""
        loglevel = logging.DEBUG if debug else logging.INFO
        root_logger = self.reset()
        root_logger.setLevel(loglevel)
        if logfile:
            logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
        else:
            logstream = sys.stderr
        # write out cached logs
        logstream.write(self._logstream.getvalue())
        handler = logging.StreamHandler(logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


##########################################################################
# settings

class Settings(object):
    """Read and retrieve command-line settings and options."""

    def __init__(self, arguments=None):
        """Initialise settings."""
        if arguments is None:
            arguments = sys.argv[1:]
        lumberjack = Lumberjack()
        try:
            # store options in options dictionary
            self._options = ArgumentParser().retrieve_options(list(arguments))
        except Exception:
            # avoid losing exception messages occuring while logging was disabled
            lumberjack.reset()
            raise
        # prepare global logger for use by main program
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def get(self, name, get_default=True):
        """Get value of option; choose whether to get default or None (unspecified)."""
        try:
            value = self._options[name]
            if get_default and (value is None or value == u''):
                raise KeyError(name)
        except KeyError:
            if not get_default:
                return None
            try:
                value = ARGUMENTS[name][u'default']
            except KeyError:
                if name in range(NUM_POSITIONAL):
                    return u''
                raise
        return value

    @property
    def session_params(self):
        """Return a dictionary of parameters for the Session object."""
        return {
            u'max_steps': self.get('max-steps'),
            u'label_match': self.get('label-match'),
        }

    @property
    def program(self):
        """Program file name; empty for standard input."""
        name = self.get(0)
        return u'' if name == u'-' else name

    @property
    def version(self):
        """Version operating mode."""
        return self.get('version')

    @property
    def help(self):
        """Help operating mode."""
        return self.get('help')

    @property
    def debug(self):
        """Debugging mode."""
        return self.get('debug')


class ArgumentParser(object):
    """Parse LineBASIC config file and command-line arguments."""

    def retrieve_options(self, argv):
        """Retrieve command line and option file options."""
        # convert command line arguments to string dictionary form
        remaining = self._get_arguments_dict(argv)
        # config file settings
        args = self._parse_config_arg_and_process_config_file(remaining)
        unrecognised = [_k for _k in args if _k not in ARGUMENTS]
        for key in unrecognised:
            logging.warning(
                u'Ignored unrecognised option `%s=%s` in configuration file', key, args.pop(key)
            )
        # command-line args override config file settings
        args.update(self._parse_args(remaining))
        # clean up arguments
        return {_k: self._parse_type(_k, _v) for _k, _v in args.items()}

    def _get_arguments_dict(self, argv):
        """Convert command-line arguments to dictionary."""
        args = {}
        arg_deque = deque(argv)
        # positional arguments
        pos = 0
        # use -- to end option parsing, everything is a positional argument afterwards
        options_ended = False
        while arg_deque:
            arg = arg_deque.popleft()
            if not arg.startswith(u'-') or arg == u'-' or options_ended:
                # not an option flag, interpret as positional
                args[pos] = arg
                pos += 1
            elif arg == u'--':
                options_ended = True
            else:
                key, _, value = arg.partition(u'=')
                if key.startswith(u'--'):
                    # long option
                    if key[2:]:
                        args[key[2:]] = value
                else:
                    # starts with one dash; only the last of several flags can take a value
                    for i, short_arg in enumerate(key[1:]):
                        try:
                            long_arg, long_arg_value = SHORT_ARGS[short_arg]
                        except KeyError:
                            logging.warning(u'Ignored unrecognised option `-%s`', short_arg)
                            continue
                        if long_arg_value is None and i == len(key) - 2:
                            if not value and arg_deque and not arg_deque[0].startswith(u'-'):
                                # -key value, without = to connect
                                value = arg_deque.popleft()
                            args[long_arg] = value
                        else:
                            args[long_arg] = long_arg_value or u''
        return args

    def _parse_config_arg_and_process_config_file(self, remaining):
        """Find the correct config file and read it."""
        config_file = remaining.pop(u'config', None)
        if not config_file and os.path.exists(CONFIG_NAME):
            config_file = CONFIG_NAME
        if not config_file:
            return {}
        return self._read_config_file(config_file)

    def _read_config_file(self, config_file):
        """Read the settings section of a config file."""
        try:
            config = configparser.RawConfigParser(allow_no_value=True)
            # use utf_8_sig to ignore a BOM if it's at the start of the file
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                config.read_file(f)
        except (configparser.Error, IOError):
            logging.warning(
                u'Error in configuration file `%s`. Configuration not loaded.', config_file
            )
            return {}
        if not config.has_section(SECTION):
            return {}
        # options without value count as specified
        return {_k: _v or u'' for _k, _v in config.items(SECTION)}

    def _parse_args(self, remaining):
        """Process command line options."""
        known = list(ARGUMENTS.keys()) + list(range(NUM_POSITIONAL))
        args = {}
        for d, value in remaining.items():
            if d in known:
                args[d] = value
            elif isinstance(d, int):
                logging.warning(
                    u'Ignored surplus positional command-line argument #%s: `%s`', d, value
                )
            else:
                logging.warning(u'Ignored unrecognised command-line argument `%s`', d)
        return args

    ##########################################################################
    # type conversions

    def _parse_type(self, d, arg):
        """Convert argument to required type."""
        if d not in ARGUMENTS:
            return arg
        if u'choices' in ARGUMENTS[d]:
            arg = arg.lower()
        if ARGUMENTS[d][u'type'] == u'int':
            arg = self._to_int(d, arg)
        elif ARGUMENTS[d][u'type'] == u'bool':
            arg = self._to_bool(d, arg)
        if u'choices' in ARGUMENTS[d]:
            if arg and arg not in ARGUMENTS[d][u'choices']:
                logging.warning(
                    u'Value `%s=%s` ignored; should be one of (`%s`)',
                    d, arg, u'`, `'.join(ARGUMENTS[d][u'choices'])
                )
                arg = u''
        if u'check' in ARGUMENTS[d]:
            if arg is not None and arg != u'' and not ARGUMENTS[d][u'check'](arg):
                logging.warning(u'Value `%s=%s` ignored; not recognised', d, arg)
                arg = None
        return arg

    def _to_bool(self, argname, strval):
        """Convert bool string to bool. Empty string (i.e. specified) means True."""
        if strval == u'':
            return True
        if strval.upper() in TRUES:
            return True
        elif strval.upper() in FALSES:
            return False
        else:
            logging.warning(
                u'Boolean option `%s=%s` interpreted as `%s=True`',
                argname, strval, argname
            )
        return True

    def _to_int(self, argname, strval):
        """Convert int string to int."""
        if strval:
            try:
                return int(strval)
            except ValueError:
                logging.warning(
                    u'Option `%s=%s` ignored: value should be an integer',
                    argname, strval
                )
        return None
