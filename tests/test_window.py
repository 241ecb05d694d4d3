from gameboiler.window import Window


def test_set_size():
    window = Window()
    window.set_size(640, 480)
    assert (window.width, window.height) == (640, 480)


def test_toggle_fullscreen_twice_restores():
    window = Window()
    window.toggle_fullscreen()
    assert window.fullscreen is True
    window.toggle_fullscreen()
    assert window.fullscreen is False


def test_title_defaults_to_none_and_is_settable():
    window = Window()
    assert window.title is None
    window.title = "demo"
    assert window.title == "demo"