"""
具体生成器 - Concrete Builders

两种固定取值的游戏配置：AAA 大作与独立游戏。
Two fixed-value game configurations: an AAA blockbuster and an indie game.
"""

from __future__ import annotations

from typing import Dict, List, Type

from ..errors import UnknownVariantError
from .base import GameBuilder


class TripleAGameBuilder(GameBuilder):
    """AAA 大作 - AAA blockbuster"""

    variant = "aaa"
    title = "AAA Project"

    def build_graphics(self) -> None:
        self.game.set_graphics("Ultra 4K, Ray Tracing")

    def build_sound(self) -> None:
        self.game.set_sound("Dolby Atmos 7.1 Surround")

    def build_storyline(self) -> None:
        self.game.set_storyline("Epic saga with nonlinear plot")


class IndieGameBuilder(GameBuilder):
    """独立游戏 - Indie game"""

    variant = "indie"
    title = "Indie Project"

    def build_graphics(self) -> None:
        self.game.set_graphics("Pixel art (retro style)")

    def build_sound(self) -> None:
        self.game.set_sound("8-bit chiptune stereo")

    def build_storyline(self) -> None:
        self.game.set_storyline("Short philosophical story")


BUILDER_VARIANTS: Dict[str, Type[GameBuilder]] = {
    TripleAGameBuilder.variant: TripleAGameBuilder,
    IndieGameBuilder.variant: IndieGameBuilder,
}
"""
生成器注册表 - Builder Registry

按注册顺序排列：aaa, indie。
In registration order: aaa, indie.
"""


def known_variants() -> List[str]:
    return list(BUILDER_VARIANTS)


def create_builder(name: str) -> GameBuilder:
    """
    按名称创建生成器 - Create Builder by Name

    参数 Parameters:
        name: 注册表中的名称，不区分大小写
              Registry key, case-insensitive

    返回 Returns:
        新的生成器实例
        A fresh builder instance
    """
    key = (name or "").strip().lower()
    builder_cls = BUILDER_VARIANTS.get(key)
    if builder_cls is None:
        raise UnknownVariantError(name, known_variants())
    return builder_cls()
