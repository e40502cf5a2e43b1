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
Locate the branch that the current branch was most likely created from.

Each strategy asks git a small number of read-only questions through a
command service exposing 'execute(args) -> CommandResult' and either names a
branch or returns None to let the next strategy try. A failing git command
never raises here, it just means the strategy has nothing to offer.
"""

from abc import ABCMeta
from abc import abstractmethod

from git_branch_commits.errors import GitBranchCommitsError
from git_branch_commits.lib.utils import GitCommandRunner
from git_branch_commits.log import LogDedentMixin


DEFAULT_STRATEGIES = ('upstream', 'contains', 'distance')

# larger than any commit count a real repository will produce
_MAX_DISTANCE = float('inf')


class ParentResolutionError(GitBranchCommitsError):
    """Exception thrown by L{ParentResolver}"""
    pass


class ParentStrategiesFactory(object):
    __strategies = None

    @classmethod
    def get_strategy(cls, type):
        if type in cls.list_strategies():
            return cls.__strategies[type]
        else:
            raise ParentResolutionError(
                "No class implements the requested strategy: "
                "{0}".format(type))

    @classmethod
    def create_strategy(cls, type, *args, **kwargs):
        return cls.get_strategy(type)(*args, **kwargs)

    @classmethod
    def list_strategies(cls):
        cls.__strategies = {
            subclass._strategy: subclass
            for subclass in ParentStrategy.__subclasses__()
            if subclass._strategy}
        return sorted(cls.__strategies.keys())


class ParentStrategy(LogDedentMixin, metaclass=ABCMeta):
    """Base parent branch strategy class

    Subclasses implement find() for one way of guessing the parent of a
    branch.
    """

    _strategy = None

    def __init__(self, runner, *args, **kwargs):
        self.runner = runner
        super(ParentStrategy, self).__init__(*args, **kwargs)

    @classmethod
    def get_strategy_name(cls):
        return cls._strategy

    @abstractmethod
    def find(self, branch):
        """Return the name of the parent of 'branch' or None"""
        raise NotImplementedError

    def distance(self, base, branch):
        """
        Number of commits reachable from 'branch' but not from 'base'

        Returns None when the count cannot be obtained or is not a number.
        """
        result = self.runner.execute(
            ['rev-list', '--count', '{0}..{1}'.format(base, branch)])
        if not result.success:
            self.log.debug("Unable to count %s..%s: %s",
                           base, branch, result.output)
            return None
        try:
            return int(result.output)
        except ValueError:
            self.log.debug("Ignoring non-numeric count for %s..%s: %r",
                           base, branch, result.output)
            return None


class UpstreamTrackingStrategy(ParentStrategy):
    """Use the configured upstream of the branch"""

    _strategy = "upstream"

    def find(self, branch):
        result = self.runner.execute(
            ['rev-parse', '--abbrev-ref', '--symbolic-full-name',
             '{0}@{{upstream}}'.format(branch)])
        if result.success and result.output:
            self.log.info("Using upstream tracking branch '%s'",
                          result.output)
            return result.output

        self.log.debug("No upstream configured for '%s'", branch)
        return None


class AncestorContainmentStrategy(ParentStrategy):
    """Find the branches containing the parent commit of the branch tip

    Where more than one branch contains it, prefer the one that leaves the
    fewest commits unique to the branch.
    """

    _strategy = "contains"

    def first_parent(self, branch):
        result = self.runner.execute(['rev-parse', '{0}^'.format(branch)])
        if not result.success:
            return None
        return result.output

    def candidates(self, commit, branch):
        result = self.runner.execute(
            ['branch', '--no-color', '--contains', commit])
        if not result.success:
            self.log.debug("Unable to list branches containing %s: %s",
                           commit, result.output)
            return []

        candidates = []
        for line in result.output.splitlines():
            # '*' marks the checked out branch, '+' one checked out in
            # another worktree
            name = line.lstrip('*+ ').strip()
            if not name or name == branch or name.startswith('('):
                continue
            candidates.append(name)
        return candidates

    def find(self, branch):
        commit = self.first_parent(branch)
        if not commit:
            self.log.debug("'%s' has no parent commit", branch)
            return None

        candidates = self.candidates(commit, branch)
        self.log.debug(
            """
            Branches containing %s:
                %s
            """, commit, "\n    ".join(candidates))

        if len(candidates) == 1:
            return candidates[0]

        best, best_distance = None, _MAX_DISTANCE
        for candidate in candidates:
            distance = self.distance(candidate, branch)
            # strict comparison so that the first of equals wins
            if distance is not None and distance < best_distance:
                best, best_distance = candidate, distance

        if best is not None:
            self.log.info("Selected '%s' with %d unique commits",
                          best, best_distance)
        return best


class MinimumDistanceStrategy(ParentStrategy):
    """Pick the local branch that is strictly behind by the fewest commits"""

    _strategy = "distance"

    def local_branches(self, branch):
        result = self.runner.execute(
            ['for-each-ref', '--format=%(refname:short)', 'refs/heads/'])
        if not result.success:
            self.log.debug("Unable to list local branches: %s",
                           result.output)
            return []
        return [name for name in result.output.splitlines()
                if name and name != branch]

    def find(self, branch):
        best, best_distance = None, _MAX_DISTANCE
        for candidate in self.local_branches(branch):
            distance = self.distance(candidate, branch)
            if distance is None:
                continue
            # zero means the candidate is the same as or ahead of the branch
            if 0 < distance < best_distance:
                best, best_distance = candidate, distance

        if best is not None:
            self.log.info("Closest local branch is '%s' with %d unique "
                          "commits", best, best_distance)
        return best


class Resolution(object):
    """Outcome of resolving a parent branch

    Evaluates as False when no parent was found.
    """

    def __init__(self, branch=None, strategy=None):
        self.branch = branch
        self.strategy = strategy

    @property
    def found(self):
        return self.branch is not None

    def __bool__(self):
        return self.found

    def __eq__(self, other):
        if not isinstance(other, Resolution):
            return NotImplemented
        return (self.branch, self.strategy) == (other.branch, other.strategy)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.branch, self.strategy))

    def __repr__(self):
        if not self.found:
            return "Resolution(not found)"
        return "Resolution(%r via %s)" % (self.branch, self.strategy)


NOT_FOUND = Resolution()


class ParentResolver(LogDedentMixin):
    """Try each strategy in turn and return the first branch named"""

    def __init__(self, runner=None, strategies=None, *args, **kwargs):
        super(ParentResolver, self).__init__(*args, **kwargs)

        if runner is None:
            runner = GitCommandRunner()
        self.runner = runner

        self.strategies = [
            ParentStrategiesFactory.create_strategy(name, runner)
            for name in (strategies or DEFAULT_STRATEGIES)]

    def resolve(self, branch):
        for strategy in self.strategies:
            name = strategy.get_strategy_name()
            self.log.debug("Trying '%s' strategy for '%s'", name, branch)
            parent = strategy.find(branch)
            if parent:
                return Resolution(parent, name)

        self.log.debug("No parent branch found for '%s'", branch)
        return NOT_FOUND


def find_parent_branch(branch, runner=None, strategies=None):
    """Return the most likely parent branch name of 'branch' or None"""
    return ParentResolver(runner, strategies).resolve(branch).branch
