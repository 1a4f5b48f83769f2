from src.models.game import Competitor, GameStatus, RawGame
from src.models.league import League
from src.models.scoreboard import FormattedGame, GameState

__all__ = ["Competitor", "FormattedGame", "GameState", "GameStatus", "League", "RawGame"]
