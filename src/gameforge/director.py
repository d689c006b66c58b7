from __future__ import annotations

from typing import Callable, Optional

from .builder import GameBuilder
from .errors import BuilderNotSetError
from .schemas import ComputerGame


def _no_trace(message: str) -> None:
    return None


class GameDirector:
    """导演：按固定顺序调用生成器的构建步骤"""

    def __init__(
        self,
        builder: Optional[GameBuilder] = None,
        trace: Callable[[str], None] | None = None,
    ):
        self._builder = builder
        self._trace = trace or _no_trace

    @property
    def builder(self) -> Optional[GameBuilder]:
        return self._builder

    def set_builder(self, builder: Optional[GameBuilder]) -> None:
        # 不做校验，None 也可以
        self._builder = builder

    def construct_game(self) -> ComputerGame:
        builder = self._builder
        if builder is None:
            raise BuilderNotSetError()

        name = type(builder).__name__
        steps = [
            ("create_new_product", builder.create_new_product),
            ("build_graphics", builder.build_graphics),
            ("build_sound", builder.build_sound),
            ("build_storyline", builder.build_storyline),
        ]
        for step_name, step in steps:
            self._trace(f"{name}.{step_name}()")
            step()
        return builder.get_product()
