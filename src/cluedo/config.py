"""Runtime settings for a simulated game, read from the environment.

`.env` files are loaded by the CLI (python-dotenv) before `from_env` runs.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PLAYERS = 3
DEFAULT_MAX_TURNS = 200
DEFAULT_LLM_MODEL = "gemini/gemini-2.0-flash"


def _int_or_none(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


def debug_enabled() -> bool:
    return os.environ.get("CLUEDO_DEBUG", "").lower() in ("1", "true", "yes")


@dataclass
class GameSettings:
    """Settings for one run of the simulator."""

    num_players: int = DEFAULT_PLAYERS
    seed: Optional[int] = None
    max_turns: Optional[int] = DEFAULT_MAX_TURNS
    llm_model: str = DEFAULT_LLM_MODEL
    debug: bool = False

    @classmethod
    def from_env(cls) -> "GameSettings":
        """Build settings from CLUEDO_* environment variables."""
        num_players = _int_or_none(os.getenv("CLUEDO_PLAYERS"))
        max_turns = _int_or_none(os.getenv("CLUEDO_MAX_TURNS"))
        return cls(
            num_players=DEFAULT_PLAYERS if num_players is None else num_players,
            seed=_int_or_none(os.getenv("CLUEDO_SEED")),
            # 0 disables the cap
            max_turns=DEFAULT_MAX_TURNS if max_turns is None else (max_turns or None),
            llm_model=os.getenv("CLUEDO_LLM_MODEL") or DEFAULT_LLM_MODEL,
            debug=debug_enabled(),
        )
