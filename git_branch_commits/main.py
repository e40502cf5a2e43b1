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
List the commits that exist only on the current branch and not on its parent
branch.
"""

import argparse
import re
import sys
import weakref

from git_branch_commits import __version__
from git_branch_commits import commands
from git_branch_commits.errors import GitBranchCommitsError
from git_branch_commits.lib.utils import check_git_version
from git_branch_commits import log

try:
    import argcomplete
    argcomplete_loaded = True
except ImportError:
    argcomplete_loaded = False


DEFAULT_COMMAND = 'list'
MIN_GIT_VERSION = (1, 7, 5)

_GLOBAL_FLAGS = ('-q', '--quiet', '--verbose')
_GLOBAL_OPTIONS_WITH_VALUE = ('--log-level', '--log-file')
_TOP_LEVEL_FLAGS = ('-h', '--help', '--version')
_VERBOSE_FLAG = re.compile(r'^-v+$')


def build_parsers():
    parser = argparse.ArgumentParser(
        prog='git-branch-commits',
        description=__doc__.strip(),
        epilog='Runs the "%s" command when no command is given. See '
               '"%%(prog)s help COMMAND" for help on a specific '
               'command.' % DEFAULT_COMMAND,
        add_help=False)
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    parser.add_argument('-h', '--help', action='help',
                        help='show this help message and exit')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-q', '--quiet', action='store_true',
                       help='Suppress additional output except for errors, '
                            'conflicts with --verbose')
    group.add_argument('-v', '--verbose', action='count', default=1,
                       help='Increase verbosity from commands, conflicts '
                            'with --quiet. May be set more than once.')
    # support logging to files as hidden options until we can hide them in
    # normal help output, while showing them in extended help or generated
    # man pages and documentation.
    parser.add_argument('--log-level', dest='log_level', default='notset',
                        help=argparse.SUPPRESS)
    parser.add_argument('--log-file', dest='log_file', help=argparse.SUPPRESS)

    subcommand_parsers = commands.get_subcommands(parser)

    parser.set_defaults(parent_parser=weakref.proxy(parser))

    return subcommand_parsers, parser


def _with_default_command(argv, subcommands):
    """
    Insert the default command after any leading global options unless a
    command, or a request for top level help or version, is already given.
    """
    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg in _GLOBAL_OPTIONS_WITH_VALUE:
            idx += 2
        elif (arg in _GLOBAL_FLAGS or _VERBOSE_FLAG.match(arg) or
                arg.split('=', 1)[0] in _GLOBAL_OPTIONS_WITH_VALUE):
            idx += 1
        else:
            break

    if idx < len(argv) and (argv[idx] in subcommands or
                            argv[idx] in _TOP_LEVEL_FLAGS):
        return argv
    return argv[:idx] + [DEFAULT_COMMAND] + argv[idx:]


def main(argv=None):

    if argv is None:
        argv = sys.argv[1:]

    (cmds, parser) = build_parsers()

    if argcomplete_loaded:
        argcomplete.autocomplete(parser)
    args = parser.parse_args(_with_default_command(list(argv), cmds))

    logger = log.setup_console_logging(verbose=args.verbose,
                                       quiet=args.quiet,
                                       log_level=args.log_level,
                                       log_file=args.log_file)

    # allow help subcommand to be called before checking git version
    if args.cmd.name == "help":
        return args.cmd.run(args)

    if not check_git_version(*MIN_GIT_VERSION):
        logger.fatal("git-branch-commits requires git version %s or later",
                     ".".join(str(v) for v in MIN_GIT_VERSION))
        sys.exit(1)

    try:
        return args.cmd.run(args)
    except GitBranchCommitsError as e:
        logger.fatal("%s", e)
        logger.debug("git-branch-commits: %s", e, exc_info=e)
        sys.exit(1)


if __name__ == '__main__':
    sys.exit(main())

# vim:sw=4:sts=4:ts=4:et:
