"""GameForge：用生成器模式组装游戏配置"""

from .builder import GameBuilder, IndieGameBuilder, TripleAGameBuilder
from .director import GameDirector
from .errors import BuilderNotSetError, BuilderStateError, GameForgeError, UnknownVariantError
from .schemas import ComputerGame, DisplayLabels

__all__ = [
    "ComputerGame",
    "DisplayLabels",
    "GameBuilder",
    "TripleAGameBuilder",
    "IndieGameBuilder",
    "GameDirector",
    "GameForgeError",
    "BuilderNotSetError",
    "BuilderStateError",
    "UnknownVariantError",
]

__version__ = "0.1.0"
