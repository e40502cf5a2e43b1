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

from git_branch_commits.commands import branch_argument
from git_branch_commits.commands import GitBranchCommitsCommand
from git_branch_commits.commands import ResolverCommandMixin
from git_branch_commits.commands.listing import current_branch
from git_branch_commits.lib.parent import ParentResolutionError
from git_branch_commits.lib.parent import ParentResolver
from git_branch_commits.lib.utils import GitCommandRunner
from git_branch_commits.log import LogDedentMixin


class ParentCommand(ResolverCommandMixin, LogDedentMixin,
                    GitBranchCommitsCommand):
    """Print the most likely parent of a branch.

    Uses the same guessing as the "list" command, printing only the branch
    name so that it can be used from scripts.
    """
    name = "parent"

    def __init__(self, *args, **kwargs):
        super(ParentCommand, self).__init__(*args, **kwargs)

        branch_argument(self.parser.add_argument(
            'branch', metavar='<branch>', nargs='?', default=None,
            help='Branch to find the parent of, defaults to the current '
                 'branch.'))
        self.add_strategy_argument()

    def execute(self):
        runner = GitCommandRunner()
        branch = self.args.branch or current_branch(runner)

        resolution = ParentResolver(
            runner, self.args.strategies).resolve(branch)
        if not resolution:
            raise ParentResolutionError(
                "Could not determine parent branch of %s" % branch)

        self.log.info("Found using the '%s' strategy", resolution.strategy)
        self.log.notice(resolution.branch)
        return 0
