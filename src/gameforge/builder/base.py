"""
生成器基类 - Builder Base

定义构建游戏配置各部分的步骤接口。
Defines the step interface for building each part of a game configuration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from ..errors import BuilderStateError
from ..schemas import ComputerGame


class GameBuilder(ABC):
    """
    游戏生成器 - Game Builder

    持有一个正在构建的产品，由具体生成器逐步填充。
    Holds the product under construction; concrete builders fill it step by step.

    属性 Attributes:
    - variant: 注册表中的短名称，如 "aaa"
    - title: 输出时显示的名称，如 "AAA Project"
    """

    variant: ClassVar[str] = ""
    title: ClassVar[str] = ""

    def __init__(self) -> None:
        self._game: Optional[ComputerGame] = None

    def create_new_product(self) -> None:
        """
        创建新产品 - Create New Product

        丢弃之前正在构建的产品，开始一个新的空白产品。
        Discard any product in progress and start a fresh, empty one.
        """
        self._game = ComputerGame()

    def get_product(self) -> Optional[ComputerGame]:
        """
        获取产品 - Get Product

        返回当前产品，无论各构建步骤是否都已执行。
        Return the current product, whether or not every build step ran.
        """
        return self._game

    @property
    def game(self) -> ComputerGame:
        if self._game is None:
            raise BuilderStateError(
                f"{type(self).__name__}: create_new_product() must be called before build steps"
            )
        return self._game

    @abstractmethod
    def build_graphics(self) -> None:
        ...

    @abstractmethod
    def build_sound(self) -> None:
        ...

    @abstractmethod
    def build_storyline(self) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
