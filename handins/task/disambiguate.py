from datetime import datetime
from enum import IntEnum
from typing import Callable, List, Optional, Sequence
import click
from pydantic import BaseModel, ConfigDict
from ..errors import ExhaustedCandidates, MalformedInput, UserAborted
from ..model import AssignmentRecord
from .lateness import is_late, how_late


AFFIRMATIVE = {'y', 'yes'}
NEGATIVE = {'n', 'no'}


class WorkflowStatus(IntEnum):
    PENDING = 0
    CONFIRMED = 1
    LATE_PENDING = 2
    RELEASED = 3
    REJECTED = 4
    EXHAUSTED = 5


class WorkflowState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: WorkflowStatus
    position: int = 0
    n_candidates: int


# ----------------------------------------------------------------------------------------------------------
def parse_response(text: str, default: bool) -> Optional[bool]:
    """
    returns True for y/yes, False for n/no, the default for an empty answer, and None otherwise
    """
    answer = text.strip().lower()
    if answer == '':
        return default
    if answer in AFFIRMATIVE:
        return True
    if answer in NEGATIVE:
        return False
    return None


# ----------------------------------------------------------------------------------------------------------
def start(n_candidates: int) -> WorkflowState:
    if n_candidates == 0:
        return WorkflowState(status=WorkflowStatus.EXHAUSTED, n_candidates=0)
    return WorkflowState(status=WorkflowStatus.PENDING, position=0, n_candidates=n_candidates)


# ----------------------------------------------------------------------------------------------------------
def advance(state: WorkflowState, answer: Optional[bool]) -> WorkflowState:
    """
    applies one yes/no answer (None for an unparseable one) to a state awaiting confirmation
    """
    if answer is None:
        return state

    if state.status == WorkflowStatus.PENDING:
        if answer:
            return WorkflowState(status=WorkflowStatus.CONFIRMED, position=state.position,
                                 n_candidates=state.n_candidates)
        if state.position + 1 < state.n_candidates:
            return WorkflowState(status=WorkflowStatus.PENDING, position=state.position + 1,
                                 n_candidates=state.n_candidates)
        return WorkflowState(status=WorkflowStatus.EXHAUSTED, position=state.position,
                             n_candidates=state.n_candidates)

    if state.status == WorkflowStatus.LATE_PENDING:
        status = WorkflowStatus.RELEASED if answer else WorkflowStatus.REJECTED
        return WorkflowState(status=status, position=state.position, n_candidates=state.n_candidates)

    raise ValueError(f"State {state.status.name} does not take an answer")


# ----------------------------------------------------------------------------------------------------------
def gate(state: WorkflowState, late: bool) -> WorkflowState:
    """
    moves a confirmed candidate either straight to release or to the lateness confirmation
    """
    if state.status != WorkflowStatus.CONFIRMED:
        raise ValueError(f"Only a confirmed candidate can pass the lateness gate, not {state.status.name}")
    status = WorkflowStatus.LATE_PENDING if late else WorkflowStatus.RELEASED
    return WorkflowState(status=status, position=state.position, n_candidates=state.n_candidates)


class Disambiguator(object):
    """
    Walks the user through a ranked list of candidate assignments on the terminal.

    prompt and echo are swappable so that the same logic can be driven by canned answers.
    """

    def __init__(self, prompt: Callable[[str], str] = input, echo: Callable[[str], None] = click.echo):
        self.prompt = prompt
        self.echo = echo

    def _ask(self, state: WorkflowState, question: str, default: bool) -> WorkflowState:
        suffix = ' [Y/n] ' if default else ' [y/N] '
        while True:
            try:
                text = self.prompt(question + suffix)
            except EOFError as e:
                # input closed before an answer was given
                raise UserAborted() from e
            answer = parse_response(text, default)
            if answer is not None:
                return advance(state, answer)
            self.echo(MalformedInput().message)

    def _gate(self, state: WorkflowState, record: AssignmentRecord, now: Optional[datetime]) -> WorkflowState:
        state = gate(state, is_late(record, now))
        if state.status == WorkflowStatus.LATE_PENDING:
            lateness = how_late(record, now)
            question = f"{record.name} was due {lateness.in_words()} ago. Submit anyway?"
            state = self._ask(state, question, default=False)
        return state

    def choose(self, records: Sequence[AssignmentRecord], ranked: List[int],
               now: Optional[datetime] = None) -> AssignmentRecord:
        """
        asks the user to confirm each ranked candidate in turn, then to accept lateness if it applies

        Parameters
        ----------
        records: Sequence[AssignmentRecord]
        ranked: List[int]
            indices into records, best match first
        now: datetime, optional

        Returns
        -------
        record: AssignmentRecord
            the confirmed assignment
        """
        state = start(len(ranked))
        while state.status == WorkflowStatus.PENDING:
            candidate = records[ranked[state.position]]
            state = self._ask(state, f"Did you mean {candidate.name}?", default=True)

        if state.status == WorkflowStatus.EXHAUSTED:
            raise ExhaustedCandidates()

        record = records[ranked[state.position]]
        state = self._gate(state, record, now)
        if state.status == WorkflowStatus.REJECTED:
            raise UserAborted()
        return record

    def release(self, record: AssignmentRecord, now: Optional[datetime] = None) -> AssignmentRecord:
        """
        runs only the lateness confirmation for an assignment that needs no disambiguation
        """
        state = WorkflowState(status=WorkflowStatus.CONFIRMED, position=0, n_candidates=1)
        state = self._gate(state, record, now)
        if state.status == WorkflowStatus.REJECTED:
            raise UserAborted()
        return record
