from __future__ import annotations


class GameForgeError(RuntimeError):
    pass


class BuilderNotSetError(GameForgeError):
    """导演未设置生成器"""

    def __init__(self, message: str = "builder not set"):
        super().__init__(message)


class BuilderStateError(GameForgeError):
    """生成器在创建产品前被调用"""


class UnknownVariantError(GameForgeError, ValueError):
    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"unknown builder variant: {name!r} (known: {', '.join(known)})")
