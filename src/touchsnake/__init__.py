from .logic import GameEngine
from .state import Direction, Position, State
from .tick import Ticker

__all__ = ["GameEngine", "Direction", "Position", "State", "Ticker"]
