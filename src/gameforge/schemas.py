from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field


Locale = Literal["en", "uk"]


class DisplayLabels(BaseModel):
    """配置块的标题与字段标签"""
    header: str = "--- Configuration ---"
    graphics: str = "Graphics:"
    sound: str = "Sound:"
    storyline: str = "Storyline:"
    caption: str = "Created game #{index} ({title}):"


LABELS: Dict[str, DisplayLabels] = {
    "en": DisplayLabels(),
    "uk": DisplayLabels(
        header="--- Конфігурація Гри ---",
        graphics="Графіка:",
        sound="Звук:",
        storyline="Сюжет:",
        caption="Створено гру #{index} ({title}):",
    ),
}


def labels_for(locale: str | None) -> DisplayLabels:
    return LABELS.get((locale or "").strip().lower(), LABELS["en"])


class ComputerGame(BaseModel):
    """游戏配置（产品）

    None 表示对应的构建步骤尚未执行
    """
    graphics: Optional[str] = Field(default=None, description="画面")
    sound: Optional[str] = Field(default=None, description="音效")
    storyline: Optional[str] = Field(default=None, description="剧情")

    def set_graphics(self, graphics: str) -> None:
        self.graphics = graphics

    def set_sound(self, sound: str) -> None:
        self.sound = sound

    def set_storyline(self, storyline: str) -> None:
        self.storyline = storyline

    def is_complete(self) -> bool:
        return all(value is not None for value in self.to_dict().values())

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "graphics": self.graphics,
            "sound": self.sound,
            "storyline": self.storyline,
        }

    def render(self, labels: DisplayLabels | None = None) -> str:
        """渲染为固定格式的文本块，未设置的字段输出为空"""
        labels = labels or LABELS["en"]
        rows = [
            (labels.graphics, self.graphics),
            (labels.sound, self.sound),
            (labels.storyline, self.storyline),
        ]
        width = max(len(label) for label, _ in rows) + 1
        lines = [labels.header]
        lines.extend(f"{label.ljust(width)}{value or ''}" for label, value in rows)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
