import itertools
import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from livescore.clock import Clock, SystemClock
from livescore.errors import InvalidArgumentError, InvalidStateError, MatchNotFoundError
from livescore.models import Match, MatchStatus

logger = logging.getLogger(__name__)

DEFAULT_SCOREBOARD_LIMIT = 5


def _is_int(value) -> bool:
    # bool is an int subclass; True is not a score
    return isinstance(value, int) and not isinstance(value, bool)


def _require_team_name(value, side: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f'{side} team cannot be empty')


class MatchRegistry:
    """In-memory store of matches and the operations on their lifecycle.

    All public methods take the registry lock, so a check-then-write sequence
    (read status, validate, store new snapshot) is never interleaved with
    another caller's.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or SystemClock()
        self._matches: Dict[int, Match] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)

    def start_new_match(self, home_team: str, away_team: str) -> Match:
        _require_team_name(home_team, 'Home')
        _require_team_name(away_team, 'Away')
        with self._lock:
            match = Match(
                id=next(self._ids),
                home_team=home_team,
                away_team=away_team,
                start_time=self._clock.now(),
            )
            self._matches[match.id] = match
        logger.info(f"[start] match={match.id} {home_team} vs {away_team}")
        return match

    def get_match(self, match_id: int) -> Match:
        with self._lock:
            return self._get(match_id)

    def update_score(self, match_id: int, team: str, score: int) -> Match:
        if not _is_int(score) or score < 0:
            raise InvalidArgumentError('Score must be a non-negative integer')
        with self._lock:
            existing = self._get(match_id)
            self._require_in_progress(existing)
            if existing.home_team == team:
                updated = replace(existing, home_score=score)
            elif existing.away_team == team:
                updated = replace(existing, away_score=score)
            else:
                logger.warning(f"[score-reject] match={match_id} unknown team={team!r}")
                raise InvalidArgumentError('Team not found')
            self._matches[match_id] = updated
        logger.info(
            f"[score] match={match_id} {updated.home_team} {updated.home_score}-{updated.away_score} {updated.away_team}"
        )
        return updated

    def complete_match(self, match_id: int) -> Match:
        with self._lock:
            existing = self._get(match_id)
            self._require_in_progress(existing)
            # end_time never precedes start_time, even if the clock stepped back
            end_time = max(self._clock.now(), existing.start_time)
            completed = replace(existing, status=MatchStatus.COMPLETED, end_time=end_time)
            self._matches[match_id] = completed
        logger.info(f"[complete] match={match_id} final={completed.home_score}-{completed.away_score}")
        return completed

    def delete_match(self, match_id: int) -> bool:
        """Remove a match if present. Returns whether anything was removed."""
        with self._lock:
            removed = self._matches.pop(match_id, None)
        if removed is None:
            return False
        logger.info(f"[delete] match={match_id}")
        return True

    def get_scoreboard(self, limit: int = DEFAULT_SCOREBOARD_LIMIT) -> List[Match]:
        """Return up to ``limit`` in-progress matches, highest total first.

        Equal totals put the most recently started match first; matches that
        also share a start time keep their creation order.
        """
        if not _is_int(limit) or limit <= 0:
            raise InvalidArgumentError('Limit must be a positive integer')
        with self._lock:
            live = [m for m in self._matches.values() if m.status is MatchStatus.IN_PROGRESS]
        live.sort(key=lambda m: (m.total_score, m.start_time), reverse=True)
        return live[:limit]

    def _get(self, match_id: int) -> Match:
        try:
            return self._matches[match_id]
        except KeyError:
            raise MatchNotFoundError(match_id) from None

    def _require_in_progress(self, match: Match) -> None:
        if match.is_completed:
            logger.warning(f"[state-reject] match={match.id} already completed")
            raise InvalidStateError('Match is already completed')
