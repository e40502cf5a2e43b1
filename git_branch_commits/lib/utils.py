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

import collections
import os

import git
from git.exc import GitCommandNotFound
from git.exc import InvalidGitRepositoryError
from git.exc import NoSuchPathError
from git.repo import Repo

from git_branch_commits.errors import GitBranchCommitsError


CommandResult = collections.namedtuple('CommandResult', ['success', 'output'])


def check_git_version(major, minor, revision):
    """
    Return True if the git binary found on the path is at least the given
    version.
    """
    return git.Git().version_info[:3] >= (major, minor, revision)


class GitMixin(object):

    def __init__(self, *args, **kwargs):
        repo = kwargs.pop('repo', None)
        if repo:
            self.__repo = repo
        else:
            try:
                self.__repo = Repo(os.environ.get('GIT_WORK_TREE',
                                                  os.path.curdir),
                                   search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise GitBranchCommitsError("Not a git repository") from e

        self.__git = self.repo.git
        super(GitMixin, self).__init__(*args, **kwargs)

    @property
    def repo(self):
        return self.__repo

    @property
    def git(self):
        return self.__git

    def execute(self, args):
        """
        Run git with the given arguments and return a CommandResult

        Never raises for a failing command: 'success' reflects a zero exit
        code and 'output' holds the trimmed stdout, or on failure the trimmed
        stderr falling back to stdout when stderr is empty. A git binary that
        cannot be launched is reported the same way.
        """
        command = [self.git.GIT_PYTHON_GIT_EXECUTABLE] + list(args)
        try:
            status, stdout, stderr = self.git.execute(
                command, with_extended_output=True, with_exceptions=False)
        except GitCommandNotFound as e:
            return CommandResult(False, str(e).strip())

        stdout = (stdout or '').strip()
        if status != 0:
            return CommandResult(False, (stderr or '').strip() or stdout)
        return CommandResult(True, stdout)

    def is_detached(self):
        return not self.execute(['symbolic-ref', '-q', 'HEAD']).success

    def current_branch(self):
        """
        Return the abbreviated name of the checked out branch

        Returns 'HEAD' in detached HEAD state and None when git cannot
        resolve HEAD at all, such as in a repository without commits.
        """
        result = self.execute(['rev-parse', '--abbrev-ref', 'HEAD'])
        if not result.success:
            return None
        return result.output

    def branch_exists(self, name):
        """Whether 'name' is a local branch or a remote tracking branch"""
        return any(
            self.execute(['show-ref', '--verify', '--quiet', ref]).success
            for ref in ('refs/heads/' + name, 'refs/remotes/' + name))


class GitCommandRunner(GitMixin):
    """
    Command service bound to a repository, handed to the parent resolver so
    that it only ever sees 'execute(args) -> CommandResult'.
    """
