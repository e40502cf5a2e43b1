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

from git_branch_commits.commands import GitBranchCommitsCommand
from git_branch_commits.lib.parent import DEFAULT_STRATEGIES
from git_branch_commits.lib.parent import ParentStrategiesFactory
from git_branch_commits.log import LogDedentMixin

STRATEGIES_TOPIC = 'strategies'


def describe_strategies():
    """
    Lines naming each parent branch strategy with the first line of its
    description, default ones first in the order they are tried.
    """
    names = list(DEFAULT_STRATEGIES)
    names.extend(name for name in ParentStrategiesFactory.list_strategies()
                 if name not in names)
    width = max(len(name) for name in names)

    lines = ["Parent branch strategies, tried in this order unless "
             "'--strategy' is given:", ""]
    for name in names:
        doc = ParentStrategiesFactory.get_strategy(name).__doc__ or ''
        lines.append("  %-*s  %s" % (width, name,
                                     doc.strip().split('\n')[0]))
    return lines


class HelpCommand(LogDedentMixin, GitBranchCommitsCommand):
    """Display help about this program, one of its commands or the
    strategies used to guess the parent branch ('help strategies').
    """
    name = "help"

    def __init__(self, *args, **kwargs):
        super(HelpCommand, self).__init__(*args, **kwargs)

        self.parser.add_argument(
            'command', metavar='<command>', nargs='?',
            help="command to display help about, or '%s'" % STRATEGIES_TOPIC)

    def execute(self):
        topic = getattr(self.args, 'command', None)
        if not topic:
            self.args.parent_parser.print_help()
        elif topic == STRATEGIES_TOPIC:
            print("\n".join(describe_strategies()))
        elif topic in self.args.subcommands:
            self.args.subcommands[topic].print_help()
        else:
            self.parser.error("'%s' is not a valid subcommand or help topic"
                              % topic)
        return 0
