"""Git repository operations."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from gitco.branches import Branch, parse_branch_output
from gitco.logger import get_logger

logger = get_logger("git")


class GitError(Exception):
    """Git repository could not be used."""


@dataclass(frozen=True)
class GitFailure:
    """A git command that exited with a nonzero status."""

    message: str
    exit_code: int


@dataclass(frozen=True)
class CheckoutResult:
    """Combined output and exit status of `git checkout`."""

    output: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def _combine(stdout: str, stderr: str) -> str:
    return "\n".join(part for part in (stdout.strip(), stderr.strip()) if part)


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Initialize repository."""
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
            if self.repo.bare:
                raise GitError("Cannot operate on bare repository")
        except (GitCommandError, ValueError, InvalidGitRepositoryError, NoSuchPathError) as err:
            raise GitError(f"Failed to open repository: {err}") from err

    def _run(self, command: str, *args: str) -> tuple[int, str, str]:
        """Run a git subcommand without raising on a nonzero exit status."""
        logger.debug("Running git %s %s", command, " ".join(args))
        status, stdout, stderr = getattr(self.repo.git, command)(
            *args,
            with_extended_output=True,
            with_exceptions=False,
        )
        logger.debug("git %s exited with %s", command, status)
        return status, stdout, stderr

    def list_branches(self, include_remote: bool) -> Union[list[Branch], GitFailure]:
        """List branches, optionally including remote-tracking ones."""
        args = ["--list", "--color=never"]
        if include_remote:
            args.insert(0, "--all")

        status, stdout, stderr = self._run("branch", *args)
        if status != 0:
            return GitFailure(_combine(stdout, stderr), status)
        return parse_branch_output(stdout)

    def checkout(self, branch_name: str) -> CheckoutResult:
        """Check out a branch, reporting git's own output and exit status."""
        status, stdout, stderr = self._run("checkout", branch_name)
        return CheckoutResult(_combine(stdout, stderr), status)
