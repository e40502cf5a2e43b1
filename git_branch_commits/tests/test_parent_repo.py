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

"""Parent resolution against real repositories"""

from git_branch_commits.lib.parent import ParentResolver
from git_branch_commits.lib.parent import Resolution
from git_branch_commits.lib.utils import GitCommandRunner
from git_branch_commits.tests import base


class TestResolveForked(base.GitRepoTestCase):
    """Repository layout being tested

          C         develop
         /
        A           main
         \\
          B         topic
    """

    tree = [
        ('A', []),
        ('B', ['A']),
        ('C', ['A']),
    ]

    branches = {
        'head': 'topic',
        'main': 'A',
        'develop': 'C',
        'topic': 'B',
    }

    def _resolve(self, branch='topic'):
        return ParentResolver(GitCommandRunner()).resolve(branch)

    def test_first_listed_on_equal_distance(self):
        """Both branches contain A and leave only B unique to topic"""
        self.assertEqual(Resolution('develop', 'contains'), self._resolve())

    def test_upstream_wins(self):
        self.git.config('branch.topic.remote', '.')
        self.git.config('branch.topic.merge', 'refs/heads/main')

        self.assertEqual(Resolution('main', 'upstream'), self._resolve())

    def test_forced_branch_colors(self):
        self.git.config('color.branch', 'always')
        self.git.config('color.ui', 'always')

        self.assertEqual(Resolution('develop', 'contains'), self._resolve())

    def test_not_checked_out_branch(self):
        """Resolving develop does not depend on what is checked out"""
        self.assertEqual(Resolution('main', 'contains'),
                         self._resolve('develop'))


class TestResolveUnsharedParent(base.GitRepoTestCase):
    """Repository layout being tested

        A---B---C   topic
        |
        main
    """

    tree = [
        ('A', []),
        ('B', ['A']),
        ('C', ['B']),
    ]

    branches = {
        'head': 'topic',
        'main': 'A',
        'topic': 'C',
    }

    def test_falls_back_to_distance(self):
        """Nothing other than topic contains B"""
        resolution = ParentResolver(GitCommandRunner()).resolve('topic')

        self.assertEqual(Resolution('main', 'distance'), resolution)


class TestResolveRootCommit(base.GitRepoTestCase):
    """Repository layout being tested

        A---B       main

        R           topic, level
    """

    tree = [
        ('A', []),
        ('B', ['A']),
        ('R', []),
    ]

    branches = {
        'head': 'topic',
        'main': 'B',
        'level': 'R',
        'topic': 'R',
    }

    def test_root_commit(self):
        resolution = ParentResolver(GitCommandRunner()).resolve('topic')

        self.assertEqual(Resolution('main', 'distance'), resolution)

    def test_no_parent(self):
        self.git.branch('main', D=True)

        resolution = ParentResolver(GitCommandRunner()).resolve('topic')

        self.assertFalse(resolution)
