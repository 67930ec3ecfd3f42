"""Tests for the depth-first commit-history walker."""

import sys

import pytest

from codecommit_history.domain.exceptions import CommitNotFoundError, ServiceError
from codecommit_history.services.commit_walker import CommitHistoryWalker

from conftest import FakeHistorySource, make_commit


def _ids(commits):
    return [c.commit_id for c in commits]


class TestLinearHistory:
    def test_yields_every_commit_tip_first(self):
        commits = [make_commit("c5", "c4"), make_commit("c4", "c3"), make_commit("c3", "c2"),
                   make_commit("c2", "c1"), make_commit("c1")]
        walker = CommitHistoryWalker(FakeHistorySource(commits=commits))

        visited = _ids(walker.walk("repo", "c5"))

        assert visited == ["c5", "c4", "c3", "c2", "c1"]

    def test_root_commit_stops_without_further_fetches(self):
        source = FakeHistorySource(commits=[make_commit("root")])

        visited = _ids(CommitHistoryWalker(source).walk("repo", "root"))

        assert visited == ["root"]
        assert source.commit_fetches() == ["root"]

    def test_history_deeper_than_recursion_limit(self):
        depth = sys.getrecursionlimit() + 500
        commits = [make_commit(f"c{i}", f"c{i - 1}") for i in range(1, depth)]
        commits.append(make_commit("c0"))
        walker = CommitHistoryWalker(FakeHistorySource(commits=commits))

        visited = _ids(walker.walk("repo", f"c{depth - 1}"))

        assert len(visited) == depth
        assert visited[-1] == "c0"


class TestMergeHistory:
    @pytest.fixture
    def diamond(self):
        # m merges a and b, which both descend from r
        return FakeHistorySource(commits=[
            make_commit("m", "a", "b"),
            make_commit("a", "r"),
            make_commit("b", "r"),
            make_commit("r"),
        ])

    def test_first_parent_history_is_visited_before_second_parent(self):
        source = FakeHistorySource(commits=[
            make_commit("m", "a2", "b2"),
            make_commit("a2", "a1"), make_commit("a1"),
            make_commit("b2", "b1"), make_commit("b1"),
        ])

        visited = _ids(CommitHistoryWalker(source).walk("repo", "m"))

        assert visited == ["m", "a2", "a1", "b2", "b1"]

    def test_shared_ancestor_is_yielded_once_per_path(self, diamond):
        visited = _ids(CommitHistoryWalker(diamond).walk("repo", "m"))

        assert visited == ["m", "a", "r", "b", "r"]
        assert len(visited) > len(set(visited))

    def test_deduplicate_yields_each_commit_once(self, diamond):
        walker = CommitHistoryWalker(diamond, deduplicate=True)

        visited = _ids(walker.walk("repo", "m"))

        assert visited == ["m", "a", "r", "b"]
        assert diamond.commit_fetches() == ["m", "a", "r", "b"]

    def test_visited_set_is_scoped_to_one_walk(self, diamond):
        walker = CommitHistoryWalker(diamond, deduplicate=True)

        first = _ids(walker.walk("repo", "a"))
        second = _ids(walker.walk("repo", "b"))

        assert first == ["a", "r"]
        assert second == ["b", "r"]


class TestFailures:
    def test_fetch_failure_stops_the_walk(self):
        source = FakeHistorySource(
            commits=[make_commit("c3", "c2"), make_commit("c2", "c1"), make_commit("c1")],
            failing_commits={"c2"},
        )
        walk = CommitHistoryWalker(source).walk("repo", "c3")

        assert next(walk).commit_id == "c3"
        with pytest.raises(ServiceError):
            next(walk)
        assert "c1" not in source.commit_fetches()

    def test_missing_commit_raises_not_found(self):
        source = FakeHistorySource(commits=[make_commit("c2", "gone")])

        with pytest.raises(CommitNotFoundError):
            list(CommitHistoryWalker(source).walk("repo", "c2"))

    def test_commits_are_fetched_lazily(self):
        source = FakeHistorySource(commits=[make_commit("c2", "c1"), make_commit("c1")])

        walk = CommitHistoryWalker(source).walk("repo", "c2")
        assert source.commit_fetches() == []
        next(walk)
        assert source.commit_fetches() == ["c2"]
