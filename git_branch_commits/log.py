#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#


"""
Logging for the git-branch-commits tool

Everything the tool reports to the user goes through the logging library.
A 'NOTICE' level sits between INFO and WARNING and is what the default
verbosity shows on the console, so that '-q' can silence all regular output
while '-v' adds progressively more detail about how the parent branch was
chosen.
"""

import logging
import sys
import textwrap


LOGGER_NAME = "git-branch-commits"

NOTICE = (logging.INFO + logging.WARN) // 2
logging.NOTICE = NOTICE
logging.addLevelName(NOTICE, "NOTICE")

CONSOLE_FORMAT = "%(message)s"
ERROR_FORMAT = "%(levelname)-8s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s: %(message)s"


def get_logger(name=None):
    """
    Wrapper for standard logging.getLogger that ensures all loggers in this
    application will have their name prefixed with 'git-branch-commits'.
    """
    name = ".".join([x for x in (LOGGER_NAME, name) if x])

    return logging.getLogger(name)


# sorted in order of verbosity "['level', 'alias']"
_levels = [
    ['critical', 'fatal'],
    ['error'],
    ['warning', 'warn'],
    ['notice'],
    ['info'],
    ['debug']
]


def get_increment_level(count, default='warning'):
    """
    Given a default level to start from, and a count to increment the logging
    level by, return the associated level that is 'count' levels more verbose.
    """
    idx = next((idx for idx, sublist in enumerate(_levels) if
                default in sublist), None)
    if idx is None:
        raise ValueError("Unknown logging level: %s" % default)
    return _levels[min(idx + count, len(_levels) - 1)][0].upper()


def get_level(name):
    """Map a level name, including 'notice', to its numeric value"""
    return getattr(logging, name.upper(), logging.NOTSET)


class LevelFilterIgnoreAbove(logging.Filter):
    def __init__(self, level):
        super(LevelFilterIgnoreAbove, self).__init__()
        self.level = level

    def filter(self, record):
        return record.levelno < self.level


class LevelFilterIgnoreBelow(logging.Filter):
    def __init__(self, level):
        super(LevelFilterIgnoreBelow, self).__init__()
        self.level = level

    def filter(self, record):
        return record.levelno >= self.level


class DedentLogger(logging.Logger):

    def _log(self, level, msg, args, **kwargs):
        dedent = kwargs.pop('dedent', True)
        if dedent:
            msg = textwrap.dedent(msg.lstrip('\n'))
        super(DedentLogger, self)._log(level, msg, args, **kwargs)

    def notice(self, msg, *args, **kwargs):
        """
        Supports same arguments as default methods available from
        logging.Logger class
        """
        if self.isEnabledFor(NOTICE):
            self._log(NOTICE, msg, args, **kwargs)


# override default logger class for everything that imports this module
logging.setLoggerClass(DedentLogger)


class LogDedentMixin(object):

    def __init__(self, *args, **kwargs):
        self._log = get_logger('%s.%s' % (__name__, self.__class__.__name__))

        super(LogDedentMixin, self).__init__(*args, **kwargs)

    @property
    def log(self):
        return self._log


def setup_console_logging(verbose=1, quiet=False, log_level='notset',
                          log_file=None, stdout=None, stderr=None):
    """
    Configure the application logger for console output

    Regular messages go to stdout up to WARNING, errors always go to stderr
    regardless of '--quiet', and an optional log file records everything
    down to the requested '--log-level'.
    """
    file_log_level = get_level(log_level)
    console_log_level = get_level(get_increment_level(verbose))
    if quiet:
        console_log_level = logging.NOTSET

    # most verbose of the enabled outputs, stderr is fixed at ERROR
    main_log_level = min([value
                          for value in (file_log_level, console_log_level)
                          if value != logging.NOTSET
                          ] + [logging.ERROR])
    logger = get_logger()
    logger.setLevel(main_log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if not quiet:
        console = logging.StreamHandler(stdout or sys.stdout)
        console.setLevel(console_log_level)
        console.addFilter(LevelFilterIgnoreAbove(logging.ERROR))
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console)

    err_con = logging.StreamHandler(stderr or sys.stderr)
    err_con.setLevel(logging.ERROR)
    err_con.addFilter(LevelFilterIgnoreBelow(logging.ERROR))
    err_con.setFormatter(logging.Formatter(ERROR_FORMAT))
    logger.addHandler(err_con)

    if log_file:
        filehandler = logging.FileHandler(log_file)
        filehandler.setLevel(file_log_level)
        filehandler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(filehandler)

    return logger
