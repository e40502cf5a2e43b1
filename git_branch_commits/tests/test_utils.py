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

"""Tests for then 'utils' module"""

from subprocess import check_output

import fixtures
from git.exc import GitCommandNotFound
import mock
import testtools
from testtools import matchers

from git_branch_commits.errors import GitBranchCommitsError
from git_branch_commits.lib import utils as u
from git_branch_commits.tests import base


class TestCheckGitVersion(testtools.TestCase):
    """Test case for check_git_version function"""

    @classmethod
    def get_current_git_version(cls):
        """
        Retrieve system git version, quick and dirty method but need
        to be different from the one used in the actual function tested
        """

        output = check_output(['git', 'version']).decode('utf-8')
        ver = output.split(' ')[2]
        (_major_s, _minor_s, _revision_s) = ver.split('.')[:3]

        return (int(_major_s), int(_minor_s), int(_revision_s))

    def test_greater_major(self):
        """
        Test failure with a _major version requirement greater than the current
        one
        """

        self.assertFalse(u.check_git_version(999, 0, 0))

    def test_greater_minor(self):
        _maj = TestCheckGitVersion.get_current_git_version()[0]
        self.assertFalse(u.check_git_version(_maj, 999, 0))

    def test_equal(self):
        """
        Test success with a version requirement that equals the current one
        """

        (_maj, _min, _rev) = TestCheckGitVersion.get_current_git_version()
        self.assertTrue(u.check_git_version(_maj, _min, _rev))

    def test_lesser_major(self):
        self.assertTrue(u.check_git_version(0, 999, 999))


class TestGitCommandRunner(base.GitRepoTestCase):
    """Test case for the git command service"""

    tree = [
        ('A', []),
        ('B', ['A']),
    ]

    branches = {
        'head': 'topic',
        'main': 'A',
        'topic': 'B',
    }

    def test_success(self):
        runner = u.GitCommandRunner()

        result = runner.execute(['rev-list', '--count', 'main..topic'])

        self.assertEqual(u.CommandResult(True, '1'), result)

    def test_failure_uses_stderr(self):
        runner = u.GitCommandRunner()

        result = runner.execute(['rev-parse', 'topic@{upstream}'])

        self.assertFalse(result.success)
        self.assertThat(result.output, matchers.StartsWith('fatal:'))
        self.assertEqual(result.output, result.output.strip())

    def test_launch_failure(self):
        runner = u.GitCommandRunner(repo=self.repo)
        self.useFixture(fixtures.MockPatch(
            'git.cmd.Git.execute',
            side_effect=GitCommandNotFound('git', OSError('not found'))))

        result = runner.execute(['rev-parse', 'HEAD'])

        self.assertFalse(result.success)
        self.assertThat(result.output, matchers.Contains('not found'))

    def test_current_branch(self):
        runner = u.GitCommandRunner()

        self.assertEqual('topic', runner.current_branch())
        self.assertFalse(runner.is_detached())

    def test_detached(self):
        self.git.checkout(self.commits['A'], detach=True, quiet=True)
        runner = u.GitCommandRunner()

        self.assertEqual('HEAD', runner.current_branch())
        self.assertTrue(runner.is_detached())

    def test_unborn_branch(self):
        self.git.symbolic_ref('HEAD', 'refs/heads/unborn')
        runner = u.GitCommandRunner()

        self.assertIsNone(runner.current_branch())

    def test_branch_exists(self):
        self.git.update_ref('refs/remotes/origin/main', 'main')
        runner = u.GitCommandRunner()

        self.assertTrue(runner.branch_exists('main'))
        self.assertTrue(runner.branch_exists('origin/main'))
        self.assertFalse(runner.branch_exists('origin/topic'))
        self.assertFalse(runner.branch_exists('nosuch'))


class TestGitMixin(base.BaseTestCase):

    def test_not_a_repository(self):
        path = self.useFixture(fixtures.TempDir()).path
        self.useFixture(fixtures.EnvironmentVariable('GIT_WORK_TREE', path))

        e = self.assertRaises(GitBranchCommitsError, u.GitCommandRunner)
        self.assertEqual("Not a git repository", str(e))

    def test_given_repo(self):
        repo = mock.Mock()

        runner = u.GitCommandRunner(repo=repo)

        self.assertIs(repo, runner.repo)
        self.assertIs(repo.git, runner.git)
