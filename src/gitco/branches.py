"""Branch listing parsing and numbering."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from gitco.logger import get_logger

logger = get_logger("branches")

REMOTE_PREFIX = "remotes/"
# Marker column plus separator, e.g. "* " or "  "
LINE_PREFIX_LENGTH = 2


@dataclass(frozen=True)
class Branch:
    """A branch as listed by `git branch`."""

    name: str
    is_remote: bool = False
    is_current: bool = False


@dataclass(frozen=True)
class BranchDisplay:
    """A numbered branch ready to be rendered."""

    number: str
    name: str
    is_remote: bool = False
    is_current: bool = False


def _parse_line(line: str) -> Optional[Branch]:
    """Parse one `git branch` line, or return None if it is malformed."""
    if len(line) <= LINE_PREFIX_LENGTH:
        return None

    is_current = line.startswith("*")
    name = line[LINE_PREFIX_LENGTH:]
    is_remote = False

    if name.startswith(REMOTE_PREFIX):
        is_remote = True
        # "remotes/origin/HEAD -> origin/master" -> "HEAD"
        ref = name.split(" ")[0]
        name = "/".join(ref.split("/")[2:])

    if not name:
        return None
    return Branch(name, is_remote=is_remote, is_current=is_current)


def _sort_key(branch: Branch) -> tuple[str, str, bool]:
    # Case-insensitive first, lowercase before uppercase on ties, local before remote
    return branch.name.casefold(), branch.name.swapcase(), branch.is_remote


def parse_branch_output(output: str) -> list[Branch]:
    """Turn raw `git branch` output into a sorted list of unique branches.

    A local branch wins over a remote branch of the same name. Lines too
    short to hold a branch name are skipped with a warning.
    """
    text = output.rstrip().replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []

    parsed = []
    for line in text.split("\n"):
        branch = _parse_line(line)
        if branch is None:
            logger.warning("Skipping malformed branch line: %r", line)
            continue
        parsed.append(branch)

    branches: list[Branch] = []
    seen: set[str] = set()
    for branch in sorted(parsed, key=_sort_key):
        if branch.name in seen:
            continue
        seen.add(branch.name)
        branches.append(branch)
    return branches


def filter_and_number(branches: list[Branch], filter: Optional[str] = None) -> Iterator[BranchDisplay]:
    """Number branches by their position in the full list, then filter by name.

    Numbers and their padding come from the unfiltered list, so a branch keeps
    its number no matter which filter is active.
    """
    width = len(str(len(branches)))
    numbered: Iterable[BranchDisplay] = (
        BranchDisplay(
            number=f"{position:>{width}}. ",
            name=branch.name,
            is_remote=branch.is_remote,
            is_current=branch.is_current,
        )
        for position, branch in enumerate(branches, start=1)
    )
    for display in numbered:
        if filter and filter not in display.name:
            continue
        yield display
