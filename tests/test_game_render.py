from gameforge.schemas import ComputerGame, DisplayLabels, labels_for


def test_render_full_game():
    game = ComputerGame()
    game.set_graphics("Ultra 4K, Ray Tracing")
    game.set_sound("Dolby Atmos 7.1 Surround")
    game.set_storyline("Epic saga with nonlinear plot")

    assert game.render() == (
        "--- Configuration ---\n"
        "Graphics:  Ultra 4K, Ray Tracing\n"
        "Sound:     Dolby Atmos 7.1 Surround\n"
        "Storyline: Epic saga with nonlinear plot\n"
    )
    assert str(game) == game.render()


def test_render_is_deterministic():
    game = ComputerGame(graphics="a", sound="b", storyline="c")
    other = ComputerGame(graphics="a", sound="b", storyline="c")

    assert game.render() == game.render() == other.render()


def test_render_unset_fields_as_empty():
    game = ComputerGame()
    game.set_sound("8-bit chiptune stereo")

    lines = game.render().splitlines()
    assert lines[1] == "Graphics:  "
    assert lines[2] == "Sound:     8-bit chiptune stereo"
    assert lines[3] == "Storyline: "


def test_setters_accept_any_text():
    game = ComputerGame()
    game.set_graphics("")
    game.set_storyline("多行\n文本")

    assert game.graphics == ""
    assert game.storyline == "多行\n文本"
    assert not game.is_complete()


def test_render_with_ukrainian_labels():
    game = ComputerGame(graphics="g", sound="s", storyline="t")

    assert game.render(labels_for("uk")) == (
        "--- Конфігурація Гри ---\n"
        "Графіка: g\n"
        "Звук:    s\n"
        "Сюжет:   t\n"
    )


def test_unknown_locale_falls_back_to_english():
    assert labels_for("fr") == DisplayLabels()
    assert labels_for(None).header == "--- Configuration ---"
