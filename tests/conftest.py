"""Test configuration and fixtures."""

from pathlib import Path
from typing import Generator, Optional, Union

import pytest
from git import Actor, Repo

from gitco.branches import Branch
from gitco.git import CheckoutResult, GitFailure
from gitco.render import Span


@pytest.fixture
def test_env(tmp_path: Path) -> Generator[tuple[Path, Path], None, None]:
    """Create a test environment with local and remote repositories.

    Local branches: master, feature/one, feature/two (current).
    Remote branches: origin/master, origin/feature/one, origin/remote-only.

    Returns:
        Tuple of (local_repo_path, remote_repo_path)
    """
    remote_path = tmp_path / "remote"
    local_path = tmp_path / "local"
    remote_path.mkdir()
    local_path.mkdir()

    Repo.init(remote_path, bare=True)
    local_repo = Repo.init(local_path)

    author = Actor("Test User", "test@example.com")
    local_repo.config_writer().set_value("user", "name", author.name).release()
    local_repo.config_writer().set_value("user", "email", author.email).release()

    # Name the unborn branch so the first commit lands on master
    local_repo.git.symbolic_ref("HEAD", "refs/heads/master")
    readme = local_path / "README.md"
    readme.write_text("# Test Repository")
    local_repo.index.add(["README.md"])
    local_repo.index.commit("Initial commit", author=author)
    master = local_repo.heads.master

    origin = local_repo.create_remote("origin", url=str(remote_path))
    origin.push("master")

    def create_branch(name: str, push: bool) -> None:
        """Create a branch off master with one commit."""
        master.checkout()
        branch = local_repo.create_head(name)
        branch.checkout()
        test_file = local_path / f"{name.replace('/', '_')}.txt"
        test_file.write_text(f"{name} content")
        local_repo.index.add([test_file.name])
        local_repo.index.commit(f"Add {name}", author=author)
        if push:
            origin.push(name)

    create_branch("feature/one", push=True)
    create_branch("remote-only", push=True)
    master.checkout()
    local_repo.delete_head("remote-only", force=True)
    create_branch("feature/two", push=False)

    yield local_path, remote_path


class FakeGateway:
    """In-memory stand-in for GitRepo."""

    def __init__(
        self,
        local: list[Branch],
        remote: Optional[list[Branch]] = None,
        checkout_code: int = 0,
    ) -> None:
        self.local = local
        self.remote = remote if remote is not None else local
        self.checkout_code = checkout_code
        self.failures: dict[bool, GitFailure] = {}
        self.listed: list[bool] = []
        self.checked_out: list[str] = []

    def list_branches(self, include_remote: bool) -> Union[list[Branch], GitFailure]:
        self.listed.append(include_remote)
        if include_remote in self.failures:
            return self.failures[include_remote]
        return list(self.remote if include_remote else self.local)

    def checkout(self, branch_name: str) -> CheckoutResult:
        self.checked_out.append(branch_name)
        return CheckoutResult(f"Switched to branch '{branch_name}'", self.checkout_code)


class ScriptedRenderer:
    """Renderer that records output lines and replays scripted input."""

    def __init__(self, commands: list[str]) -> None:
        self.commands = list(commands)
        self.lines: list[tuple[Span, ...]] = []

    def write_line(self, *spans: Span) -> None:
        self.lines.append(spans)

    def read_line(self, *prompt: Span) -> Optional[str]:
        if not self.commands:
            return None
        return self.commands.pop(0)

    @property
    def text(self) -> str:
        return "\n".join("".join(span.text for span in line) for line in self.lines)


@pytest.fixture
def letters() -> list[Branch]:
    """Ten local branches named a to j."""
    return [Branch(letter) for letter in "abcdefghij"]
