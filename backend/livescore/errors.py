"""Failure kinds raised by the match registry.

Each kind also derives from the closest builtin exception
(``ValueError``, ``LookupError``, ``RuntimeError``).
"""


class MatchError(Exception):
    pass


class InvalidArgumentError(MatchError, ValueError):
    """Malformed input: blank team name, negative score, unknown team, bad limit."""


class MatchNotFoundError(MatchError, LookupError):
    def __init__(self, match_id):
        super().__init__(f'Match {match_id} not found')
        self.match_id = match_id


class InvalidStateError(MatchError, RuntimeError):
    """Operation not allowed in the match's current lifecycle state."""
