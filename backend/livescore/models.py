from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class MatchStatus(str, Enum):
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'


@dataclass(frozen=True)
class Match:
    """Snapshot of a single fixture.

    Snapshots are never mutated; the registry swaps in a new one on every
    score change or completion.
    """

    id: int
    home_team: str
    away_team: str
    start_time: datetime
    home_score: int = 0
    away_score: int = 0
    status: MatchStatus = MatchStatus.IN_PROGRESS
    end_time: Optional[datetime] = None

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    @property
    def is_completed(self) -> bool:
        return self.status is MatchStatus.COMPLETED

    def to_dict(self):
        return {
            'id': self.id,
            'home_team': self.home_team,
            'away_team': self.away_team,
            'home_score': self.home_score,
            'away_score': self.away_score,
            'total_score': self.total_score,
            'status': self.status.value,
            'start_time': self.start_time.isoformat(),
            'end_time': self.end_time.isoformat() if self.end_time else None,
        }
