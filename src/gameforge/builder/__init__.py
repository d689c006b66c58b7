"""Builder 模块：生成器接口与具体实现"""

from .base import GameBuilder
from .variants import (
    BUILDER_VARIANTS,
    IndieGameBuilder,
    TripleAGameBuilder,
    create_builder,
    known_variants,
)

__all__ = [
    "GameBuilder",
    "TripleAGameBuilder",
    "IndieGameBuilder",
    "BUILDER_VARIANTS",
    "create_builder",
    "known_variants",
]
