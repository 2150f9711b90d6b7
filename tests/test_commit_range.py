"""Tests for commitpost.git.commit_range module."""

import pytest

from commitpost.git import CommitRange, GitError, RangeQueryError, ResolutionError, collect_commit_range

A, B, C, D = ("a" * 40, "b" * 40, "c" * 40, "d" * 40)


class TestCollectCommitRange:
    """Tests for collect_commit_range function."""

    def test_range_is_oldest_first_and_excludes_start(self, commit_source):
        """Test exclusive-inclusive range in chronological order."""
        result = collect_commit_range(commit_source, "v1.0", "HEAD")

        assert result == CommitRange(from_id=A, to_id=D, commit_ids=(B, C, D))
        assert A not in result.commit_ids

    def test_include_from_prepends_start(self, commit_source):
        """Test that include_from puts the start commit first."""
        result = collect_commit_range(commit_source, "v1.0", C, include_from=True)

        assert result.commit_ids == (A, B, C)

    def test_same_ref_is_empty(self, commit_source):
        """Test that identical endpoints give an empty range, not an error."""
        result = collect_commit_range(commit_source, "HEAD", D)

        assert result.is_empty
        assert len(result) == 0

    def test_include_from_on_empty_range(self, commit_source):
        """Test that include_from yields the start even when the range is empty."""
        result = collect_commit_range(commit_source, "HEAD", "HEAD", include_from=True)

        assert result.commit_ids == (D,)
        assert not result.is_empty

    def test_resolves_both_refs_independently(self, commit_source):
        """Test that both refs are resolved before listing."""
        collect_commit_range(commit_source, "v1.0", "HEAD")

        assert commit_source.calls[:3] == [
            ("resolve", "v1.0"),
            ("resolve", "HEAD"),
            ("list_range", A, D),
        ]

    def test_unknown_from_ref(self, commit_source):
        """Test that a bad start ref is named in the error."""
        with pytest.raises(ResolutionError) as exc_info:
            collect_commit_range(commit_source, "v0.1", "HEAD")

        assert exc_info.value.ref == "v0.1"

    def test_unknown_to_ref(self, commit_source):
        """Test that a bad end ref is named in the error."""
        with pytest.raises(ResolutionError) as exc_info:
            collect_commit_range(commit_source, "v1.0", "release")

        assert exc_info.value.ref == "release"

    def test_generic_resolve_failure_is_wrapped(self, commit_source, mocker):
        """Test that a plain GitError from resolve becomes a ResolutionError."""
        mocker.patch.object(commit_source, "resolve", side_effect=GitError("boom"))

        with pytest.raises(ResolutionError) as exc_info:
            collect_commit_range(commit_source, "main", "HEAD")

        assert '"main"' in str(exc_info.value)

    def test_generic_list_failure_is_wrapped(self, commit_source, mocker):
        """Test that a plain GitError from list_range becomes a RangeQueryError."""
        mocker.patch.object(commit_source, "list_range", side_effect=GitError("boom"))

        with pytest.raises(RangeQueryError) as exc_info:
            collect_commit_range(commit_source, "v1.0", "HEAD")

        assert exc_info.value.from_id == A
        assert exc_info.value.to_id == D
