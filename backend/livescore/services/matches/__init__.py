"""Match domain services: lifecycle bookkeeping and scoreboard ranking.

This package holds the transport-free logic that HTTP routes and socket
handlers call into, keeping request handling separate from match state.
"""

from .registry import DEFAULT_SCOREBOARD_LIMIT, MatchRegistry

__all__ = ['DEFAULT_SCOREBOARD_LIMIT', 'MatchRegistry']
