"""Pytest fixtures for git-tidy tests"""
import tempfile
from pathlib import Path

import git
import pytest

from git_tidy.config import Config
from git_tidy.services.prompt_service import PromptService


def _configure_user(repo):
    """Configure a git identity so commits and stashes work."""
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")


def _commit_file(repo, filename, content, message):
    """Write a file in the working copy and commit it."""
    path = Path(repo.working_dir) / filename
    path.write_text(content)
    repo.index.add([filename])
    return repo.index.commit(message)


class ScriptedPrompts(PromptService):
    """PromptService answering from a fixed list and recording every question."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.questions = []
        super().__init__(input_func=self._answer)

    def _answer(self, prompt):
        self.questions.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        return self.answers.pop(0)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config():
    """Configuration without the network probe."""
    return Config(check_network=False)


@pytest.fixture
def scripted_prompts():
    """Factory for prompt services answering from a script."""
    def make(*answers):
        return ScriptedPrompts(answers)

    return make


@pytest.fixture
def commit_file():
    """Helper committing a file: commit_file(repo, filename, content, message)."""
    return _commit_file


@pytest.fixture
def upstream_repo(temp_dir):
    """Create a bare 'origin' and a working clone of it used to publish commits."""
    bare_path = temp_dir / "origin.git"
    bare = git.Repo.init(bare_path, bare=True)

    seed_path = temp_dir / "upstream"
    seed_path.mkdir()
    seed = git.Repo.init(seed_path)
    _configure_user(seed)
    _commit_file(seed, "README.md", "# Test Repository\n", "Initial commit")
    seed.git.branch("-M", "main")
    seed.create_remote("origin", str(bare_path))
    seed.git.push("-u", "origin", "main")

    # Clones check out main
    bare.git.symbolic_ref("HEAD", "refs/heads/main")

    yield seed

    seed.close()
    bare.close()


@pytest.fixture
def git_repo(temp_dir, upstream_repo):
    """Create a working copy cloned from the bare origin."""
    repo = git.Repo.clone_from(str(temp_dir / "origin.git"), str(temp_dir / "work"))
    _configure_user(repo)

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a working copy with local branches main, feature-a and feature-b."""
    repo = git_repo

    for name in ("feature-a", "feature-b"):
        repo.git.checkout("-b", name)
        _commit_file(repo, f"{name}.txt", f"{name} content\n", f"Add {name}")
        repo.git.checkout("main")

    yield repo


@pytest.fixture
def dirty_repo(git_repo_with_branches):
    """Working copy on main with a modified tracked file and an untracked file."""
    repo = git_repo_with_branches
    root = Path(repo.working_dir)
    (root / "README.md").write_text("# Test Repository\n\nLocal edits\n")
    (root / "notes.txt").write_text("scratch\n")

    yield repo
