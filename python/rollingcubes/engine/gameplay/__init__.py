from rollingcubes.engine.gameplay.game import GamePlay
from rollingcubes.engine.gameplay.trace import log_roll

__all__ = ["GamePlay", "log_roll"]
