"""Shared test fixtures and configuration."""

import os
import subprocess
import tempfile
from pathlib import Path

import pytest

from prsummary.config import LLMProvider, Settings
from prsummary.llm.base import BaseLLMProvider, LLMResult


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, monkeypatch):
    """Point ~/.prsummary at a temporary directory."""
    path = temp_dir / ".prsummary"
    monkeypatch.setattr("prsummary.global_config._CONFIG_DIR", path)
    return path


@pytest.fixture
def settings():
    """Settings with a dummy OpenAI key."""
    return Settings(provider=LLMProvider.OPENAI, model="gpt-3.5-turbo", api_key="sk-test-key")


@pytest.fixture
def sample_commit_text():
    """Commit text as produced by git log for two commits."""
    return """Add login endpoint

Implements POST /login with session cookies.

Add user model

"""


@pytest.fixture
def sample_llm_reply():
    """Sample raw LLM reply with a heading title."""
    return """# Add user login

## Summary
- Add `User` model with password hashing
- Add `POST /login` endpoint

Closes PROJ-42."""


class FakeProvider(BaseLLMProvider):
    """Provider returning a canned reply and recording the messages it got."""

    name = "Fake"

    def __init__(self, settings, reply=""):
        super().__init__(settings)
        self.reply = reply
        self.calls = []

    def complete(self, messages):
        self.calls.append(messages)
        return LLMResult(content=self.reply, model=self.model, input_tokens=10, output_tokens=5)


@pytest.fixture
def fake_provider_factory(settings):
    """Build FakeProvider instances with a given reply."""

    def _make(reply=""):
        return FakeProvider(settings, reply=reply)

    return _make


def _git(repo: Path, *args: str) -> str:
    env = dict(
        os.environ,
        GIT_AUTHOR_NAME="Test",
        GIT_AUTHOR_EMAIL="test@example.com",
        GIT_COMMITTER_NAME="Test",
        GIT_COMMITTER_EMAIL="test@example.com",
    )
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
        env=env,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(temp_dir):
    """A real repository: 'dev' with one commit mirrored to origin/dev,
    and 'feature/x' checked out with two more commits."""
    repo = temp_dir / "repo"
    repo.mkdir()

    _git(repo, "init", "-q")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "checkout", "-q", "-b", "dev")
    (repo / "README.md").write_text("hello\n")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-q", "-m", "Initial commit")

    # Remote-tracking ref without a real remote
    _git(repo, "update-ref", "refs/remotes/origin/dev", "HEAD")

    _git(repo, "checkout", "-q", "-b", "feature/x")
    (repo / "a.txt").write_text("a\n")
    _git(repo, "add", "a.txt")
    _git(repo, "commit", "-q", "-m", "Add a", "-m", "First body line.")
    (repo / "b.txt").write_text("b\n")
    _git(repo, "add", "b.txt")
    _git(repo, "commit", "-q", "-m", "Add b", "-m", "Second body line.")

    return repo
