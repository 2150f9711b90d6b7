"""Shared test fixtures and configuration."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import pytest

from commitpost.config import Settings
from commitpost.git.base import CommitSource
from commitpost.git.exceptions import CommitReadError, RangeQueryError, ResolutionError
from commitpost.llm.base import BaseLLMProvider
from commitpost.publish.base import BasePublisher


@dataclass
class FakeCommit:
    """A commit known to FakeCommitSource."""

    id: str
    title: str
    body: str = ""
    files: dict = field(default_factory=dict)


class FakeCommitSource(CommitSource):
    """Deterministic in-memory history with a single linear branch."""

    def __init__(self, commits: Sequence[FakeCommit], refs: Optional[dict] = None):
        self.commits = list(commits)
        self.by_id = {commit.id: commit for commit in self.commits}
        self.refs = {"HEAD": self.commits[-1].id} if self.commits else {}
        self.refs.update(refs or {})
        self.calls: list[tuple] = []
        self.fail_reads: set[tuple[str, str]] = set()

    def resolve(self, ref: str) -> str:
        self.calls.append(("resolve", ref))
        if ref in self.refs:
            return self.refs[ref]
        if ref in self.by_id:
            return ref
        raise ResolutionError(ref, "unknown revision")

    def list_range(self, from_id: str, to_id: str) -> list[str]:
        self.calls.append(("list_range", from_id, to_id))
        order = [commit.id for commit in self.commits]
        if from_id not in order or to_id not in order:
            raise RangeQueryError(from_id, to_id, "bad range")
        start = order.index(from_id)
        end = order.index(to_id)
        return order[start + 1:end + 1]

    def _commit(self, operation: str, commit_id: str) -> FakeCommit:
        self.calls.append((f"read_{operation}", commit_id))
        if (operation, commit_id) in self.fail_reads:
            raise CommitReadError(operation, commit_id, "object not found")
        return self.by_id[commit_id]

    def read_title(self, commit_id: str) -> str:
        return self._commit("title", commit_id).title

    def read_body(self, commit_id: str) -> str:
        return self._commit("body", commit_id).body

    def read_diff(self, commit_id: str, paths: Sequence[str] = ()) -> str:
        commit = self._commit("diff", commit_id)
        selected = [path for path in commit.files if not paths or path in paths]
        return "".join(commit.files[path] for path in selected)


class FakeProvider(BaseLLMProvider):
    """Provider returning a canned completion."""

    def __init__(self, text: str = "Shipped dark mode! Try it today."):
        self.model = "fake-model"
        self.text = text
        self.calls: list[tuple[str, str]] = []

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        return self.text.strip()


class FakePublisher(BasePublisher):
    """Publisher recording posts instead of sending them."""

    def __init__(self, post_id: str = "1234567890"):
        self.post_id = post_id
        self.calls: list[tuple[str, Optional[str]]] = []

    def publish(self, text: str, community_id: Optional[str] = None) -> str:
        self.calls.append((text, community_id))
        return self.post_id

    def post_url(self, post_id: str) -> str:
        return f"https://x.com/i/web/status/{post_id}" if post_id else ""


def make_diff(path: str, added: str) -> str:
    return (
        f"diff --git a/{path} b/{path}\n"
        f"--- a/{path}\n"
        f"+++ b/{path}\n"
        "@@ -1 +1 @@\n"
        f"+{added}\n"
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_commits():
    """Four commits on a linear history, oldest first."""
    return [
        FakeCommit(id="a" * 40, title="Initial commit", files={"README.md": make_diff("README.md", "hello")}),
        FakeCommit(
            id="b" * 40,
            title="Add dark mode",
            body="Users can now switch themes.",
            files={
                "src/theme.py": make_diff("src/theme.py", "DARK = True"),
                "docs/theme.md": make_diff("docs/theme.md", "Dark mode docs"),
            },
        ),
        FakeCommit(id="c" * 40, title="Fix typo", files={"docs/theme.md": make_diff("docs/theme.md", "typo")}),
        FakeCommit(id="d" * 40, title="Empty commit"),
    ]


@pytest.fixture
def commit_source(sample_commits):
    """FakeCommitSource over sample_commits with a v1.0 tag on the first commit."""
    return FakeCommitSource(sample_commits, refs={"v1.0": "a" * 40})


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def fake_publisher():
    return FakePublisher()


@pytest.fixture
def make_settings():
    """Factory for Settings with test credentials."""

    def _make(**overrides) -> Settings:
        values = {
            "from_ref": "v1.0",
            "llm_api_key": "test-llm-key",
            "x_bearer_token": "test-x-token",
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def credentials_env():
    """Environment holding both required credentials."""
    return {"GITHUB_TOKEN": "ghp_test", "X_BEARER_TOKEN": "x_test"}
