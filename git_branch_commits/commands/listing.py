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
from git_branch_commits.errors import GitBranchCommitsError
from git_branch_commits.lib.commits import BranchCommits
from git_branch_commits.lib.parent import ParentResolver
from git_branch_commits.lib.utils import GitCommandRunner
from git_branch_commits.log import LogDedentMixin


class ListError(GitBranchCommitsError):
    """Exception thrown by L{ListCommand}"""
    pass


def current_branch(runner):
    """Return the checked out branch, refusing a detached HEAD"""
    branch = runner.current_branch()
    if not branch:
        raise ListError("Could not determine current branch")
    if branch == "HEAD":
        raise ListError("In 'detached HEAD' state")
    return branch


class ListCommand(ResolverCommandMixin, LogDedentMixin,
                  GitBranchCommitsCommand):
    """List commits on the current branch that are not on its parent.

    Unless given with '--parent', the parent branch is guessed: the
    configured upstream of the branch is used if there is one, otherwise the
    local branch containing the parent of the branch tip, otherwise the local
    branch leaving the fewest commits unique to the current branch.

    This is the default command. See also the "git log" command.
    """
    name = "list"

    def __init__(self, *args, **kwargs):
        # make sure to correctly initialize inherited objects before performing
        # any computation
        super(ListCommand, self).__init__(*args, **kwargs)

        branch_argument(self.parser.add_argument(
            '-p', '--parent', metavar='<branch>', dest='parent',
            default=None,
            help='Parent branch to compare against instead of guessing it.'),
            include_remotes=True)
        self.parser.add_argument(
            '-o', '--oneline', action='store_true',
            help='Show commits in oneline format.')
        self.parser.add_argument(
            '-s', '--stat', action='store_true',
            help='Show file statistics for each commit.')
        self.parser.add_argument(
            '-f', '--files', action='store_true',
            help='Show list of changed files.')
        self.parser.add_argument(
            '-a', '--author', action='store_true',
            help='Show author information.')
        self.parser.add_argument(
            '-d', '--date', action='store_true',
            help='Show commit dates.')
        self.parser.add_argument(
            '-g', '--graph', action='store_true',
            help='Show ASCII graph of commits.')
        self.parser.add_argument(
            '-n', '--number', metavar='<num>', type=int, default=None,
            help='Limit output to <num> commits.')
        self.add_strategy_argument()

    def validate(self):
        if self.args.number is not None and self.args.number < 1:
            self.parser.error("'--number' must be a positive integer")

    def execute(self):
        runner = GitCommandRunner()

        branch = current_branch(runner)
        self.log.notice("- Current branch: %s", branch)

        parent = self.args.parent
        if not parent:
            resolution = ParentResolver(
                runner, self.args.strategies).resolve(branch)
            if not resolution:
                raise ListError("Could not determine parent branch")
            parent = resolution.branch
        self.log.notice("- Parent branch: %s", parent)
        if not runner.branch_exists(parent):
            raise ListError("Parent branch '%s' does not exist" % parent)

        commits = BranchCommits(parent, branch, repo=runner.repo)
        count = commits.count()
        if count == 0:
            self.log.warning("- No commits found that are unique to %s",
                             branch)
            self.log.notice("- Your branch is up to date with %s", parent)
            return 0

        self.log.notice("- Found %d commits unique to %s:\n", count, branch)

        output = commits.show(oneline=self.args.oneline,
                              stat=self.args.stat,
                              files=self.args.files,
                              author=self.args.author,
                              date=self.args.date,
                              graph=self.args.graph,
                              number=self.args.number)
        if output:
            self.log.notice(output, dedent=False)

        self.log.notice("\nSummary:", dedent=False)
        self.log.notice("- Total unique commits: %d", count)
        self.log.notice("- Total files changed: %d", commits.files_changed())
        stats = commits.diff_stats()
        if stats:
            self.log.notice("- Changes: %s", stats)

        return 0

# vim:sw=4:sts=4:ts=4:et:
