"""Interactive branch selection loop."""

import re
from dataclasses import dataclass, replace
from typing import Optional, Union

from gitco.branches import Branch, BranchDisplay, filter_and_number
from gitco.git import GitFailure, GitRepo
from gitco.logger import get_logger
from gitco.render import ConsoleRenderer, Span, Tag

logger = get_logger("session")

EXIT_SUCCESS = 0
EXIT_NO_INPUT = 2

MASTER_BRANCH = "master"
HINT = "number → select    M → master    R → show remote branches    /QUERY → filter"
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class SessionState:
    """Everything the loop knows between two commands."""

    branches: tuple[Branch, ...]
    include_remote: bool = False
    filter: Optional[str] = None


@dataclass(frozen=True)
class Terminated:
    """Final state of a session.

    Args:
        exit_code: Process exit status to report
        message: Text to write before exiting, if any
    """

    exit_code: int
    message: Optional[str] = None


Transition = Union[SessionState, Terminated]


def header_lines(filter: Optional[str]) -> list[tuple[Span, ...]]:
    """Header lines, naming the active filter if there is one."""
    title = "Choose a Branch" if filter is None else f"Choose a Branch (Filter: {filter})"
    return [
        (Span(Tag.HEADER, title),),
        (Span(Tag.HEADER, "-" * len(title)),),
        (),
    ]


def branch_line(display: BranchDisplay) -> tuple[Span, ...]:
    """Spans of one numbered branch."""
    spans = [
        Span(Tag.NUMBER, display.number),
        Span(Tag.CURRENT_BRANCH if display.is_current else Tag.PLAIN, display.name),
    ]
    if display.is_remote:
        spans.append(Span(Tag.REMOTE_MARKER, " (R)"))
    return tuple(spans)


class InteractiveSession:
    """Read commands and switch branches until the user picks one or quits."""

    def __init__(self, gateway: GitRepo, renderer: ConsoleRenderer) -> None:
        self.gateway = gateway
        self.renderer = renderer

    def _error(self, message: str) -> None:
        self.renderer.write_line(Span(Tag.ERROR, "Error:"), Span(Tag.PLAIN, f" {message}"))
        self.renderer.write_line()
        self.renderer.write_line()

    def _load(self, include_remote: bool) -> Transition:
        """Fetch a fresh branch list, replacing any previous state."""
        listing = self.gateway.list_branches(include_remote)
        if isinstance(listing, GitFailure):
            logger.debug("Branch listing failed with exit code %s", listing.exit_code)
            return Terminated(listing.exit_code, listing.message)
        return SessionState(tuple(listing), include_remote=include_remote)

    def _checkout(self, branch_name: str) -> Terminated:
        result = self.gateway.checkout(branch_name)
        if not result.ok:
            logger.debug("Checkout of %s failed with exit code %s", branch_name, result.exit_code)
        return Terminated(result.exit_code, result.output)

    def start(self, include_remote: bool = False) -> Transition:
        """Build the initial state."""
        return self._load(include_remote)

    def render(self, state: SessionState) -> None:
        """Show the header, the (filtered) branch list and the key hints."""
        for line in header_lines(state.filter):
            self.renderer.write_line(*line)
        for display in filter_and_number(list(state.branches), state.filter):
            self.renderer.write_line(*branch_line(display))
        self.renderer.write_line()
        self.renderer.write_line(Span(Tag.HINT, HINT))

    def dispatch(self, state: SessionState, command: str) -> Transition:
        """Apply one command to the state."""
        command = command.strip()
        logger.debug("Dispatching command %r", command)

        if command == "M":
            return self._checkout(MASTER_BRANCH)

        if command.lower().startswith("q"):
            return Terminated(EXIT_SUCCESS)

        if command == "R":
            return self._load(not state.include_remote)

        if command.startswith("/"):
            return replace(state, filter=command[1:] or None)

        if NUMBER_PATTERN.fullmatch(command) and int(command) > 0:
            number = int(command)
            if number > len(state.branches):
                self._error(f"no branch numbered {number}!")
                return state
            return self._checkout(state.branches[number - 1].name)

        self._error("no number specified!")
        return state

    def run(self, include_remote: bool = False) -> int:
        """Run the loop and return the exit status."""
        state = self.start(include_remote)
        while isinstance(state, SessionState):
            self.render(state)
            command = self.renderer.read_line(Span(Tag.PROMPT, "> "))
            if command is None:
                state = Terminated(EXIT_NO_INPUT, "")
                break
            state = self.dispatch(state, command)

        if state.message is not None:
            self.renderer.write_line(Span(Tag.PLAIN, state.message))
        return state.exit_code
