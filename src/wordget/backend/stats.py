from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any

from wordget.config import STREAK_POLICIES

@dataclass(frozen=True)
class Stats:
    """Lifetime results, persisted under the stats key."""
    win_count: int = 0
    streak_count: int = 0
    last_played_date: str = ""
    last_game_won: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "winCount": self.win_count,
            "streakCount": self.streak_count,
            "lastPlayedDate": self.last_played_date,
        }
        if self.last_game_won is not None:
            data["lastGameWon"] = self.last_game_won
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stats":
        """Builds Stats from saved JSON. Raises ValueError on a malformed record."""
        if not isinstance(data, dict):
            raise ValueError(f"Stats record must be an object, got {type(data).__name__}.")

        win_count = data.get("winCount", 0)
        streak_count = data.get("streakCount", 0)
        for name, value in (("winCount", win_count), ("streakCount", streak_count)):
            if type(value) is not int or value < 0:
                raise ValueError(f"Stats field '{name}' must be a non-negative integer, got {value!r}.")

        last_played = data.get("lastPlayedDate") or ""
        if not isinstance(last_played, str):
            raise ValueError(f"Stats field 'lastPlayedDate' must be a string, got {last_played!r}.")

        last_won = data.get("lastGameWon")
        if last_won is not None and not isinstance(last_won, bool):
            raise ValueError(f"Stats field 'lastGameWon' must be a boolean, got {last_won!r}.")

        return cls(win_count, streak_count, last_played, last_won)

def record_result(stats: Stats,
                  won: bool,
                  today: date,
                  yesterday: date | None = None,
                  policy: str = "calendar") -> Stats:
    """
    Returns the stats after a finished round.

    "calendar": a win extends the streak only when the previous finished
    round was a win played yesterday, otherwise the streak restarts at 1.
    A loss leaves the streak alone.
    "simple": every win extends the streak, every loss resets it to 0.
    """
    if policy not in STREAK_POLICIES:
        raise ValueError(f"Unknown streak policy '{policy}'. Expected one of {STREAK_POLICIES}.")
    if yesterday is None:
        yesterday = today - timedelta(days=1)

    win_count = stats.win_count + 1 if won else stats.win_count

    if policy == "simple":
        streak = stats.streak_count + 1 if won else 0
    elif won:
        # Records written before lastGameWon existed only stored wins
        previous_won = stats.last_game_won is not False
        if previous_won and stats.last_played_date == yesterday.isoformat():
            streak = stats.streak_count + 1
        else:
            streak = 1
    else:
        streak = stats.streak_count

    return replace(stats,
        win_count=win_count,
        streak_count=streak,
        last_played_date=today.isoformat(),
        last_game_won=won
    )
