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

from git_branch_commits.errors import GitBranchCommitsError
from git_branch_commits.lib.utils import GitMixin
from git_branch_commits.log import LogDedentMixin


AUTHOR_FORMAT = "--pretty=format:%h - %an <%ae> - %s"
DATE_FORMAT = "--pretty=format:%h - %ad - %s"
DEFAULT_FORMAT = "--pretty=format:%h - %ad - %s <%an>"


class BranchCommitsError(GitBranchCommitsError):
    """Exception thrown by L{BranchCommits}"""
    pass


def log_arguments(revision_range, oneline=False, stat=False, files=False,
                  author=False, date=False, graph=False, number=None):
    """
    Build the 'git log' arguments for showing the commits in revision_range

    Only one commit format applies, with '--oneline' taking precedence over
    '--author', which takes precedence over '--date'.
    """
    args = ['--no-pager', 'log']

    if oneline:
        args.append('--oneline')
    elif author:
        args.append(AUTHOR_FORMAT)
    elif date:
        args.extend([DATE_FORMAT, '--date=short'])
    else:
        args.extend([DEFAULT_FORMAT, '--date=relative'])

    if stat:
        args.append('--stat')
    if files:
        args.append('--name-status')
    if graph:
        args.append('--graph')
    if number:
        args.extend(['-n', str(number)])

    args.append(revision_range)
    return args


class BranchCommits(LogDedentMixin, GitMixin):
    """Compare a branch against its parent.

    Queries that fail are reported as no commits, no files and no changes.
    """

    def __init__(self, parent, branch, *args, **kwargs):

        # make sure to correctly initialize inherited objects before performing
        # any computation
        super(BranchCommits, self).__init__(*args, **kwargs)

        if not parent:
            raise BranchCommitsError("No parent branch given")
        if not branch:
            raise BranchCommitsError("No branch given")

        self.parent = parent
        self.branch = branch

    @property
    def revision_range(self):
        return '{0}..{1}'.format(self.parent, self.branch)

    def count(self):
        result = self.execute(['rev-list', '--count', self.revision_range])
        if not result.success:
            self.log.debug("Counting %s failed: %s", self.revision_range,
                           result.output)
            return 0
        try:
            return int(result.output)
        except ValueError:
            self.log.debug("Unexpected count output: %r", result.output)
            return 0

    def files_changed(self):
        result = self.execute(['diff', '--name-only', self.revision_range])
        if not result.success:
            return 0
        return len([f for f in result.output.splitlines() if f.strip()])

    def diff_stats(self):
        result = self.execute(['diff', '--shortstat', self.revision_range])
        return result.output if result.success else ''

    def show(self, **options):
        result = self.execute(log_arguments(self.revision_range, **options))
        if not result.success:
            self.log.debug("git log failed: %s", result.output)
            return ''
        return result.output
