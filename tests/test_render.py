import pytest

from gameboiler.render import RAYWHITE, Color, GameRender, color_from_floats


class _RecordingApi:
    def __init__(self):
        self.calls = []

    def shutdown(self):
        self.calls.append("shutdown")


def test_color_default_alpha_is_opaque():
    assert Color(1, 2, 3).rgba == (1, 2, 3, 255)


def test_color_rgb_drops_alpha():
    assert Color(10, 20, 30, 40).rgb == (10, 20, 30)


@pytest.mark.parametrize("components", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range(components):
    with pytest.raises(ValueError):
        Color(*components)


def test_color_from_floats_extremes():
    assert color_from_floats(1.0, 0.0, 1.0, 0.0) == Color(255, 0, 255, 0)


def test_color_from_floats_truncates():
    assert color_from_floats(0.5, 0.5, 0.5, 1.0) == Color(127, 127, 127, 255)


def test_color_from_floats_clamps():
    assert color_from_floats(2.0, -1.0, 0.0, 1.5) == Color(255, 0, 0, 255)


def test_raywhite_value():
    assert RAYWHITE == Color(245, 245, 245, 255)


def test_game_render_holds_api_and_impl():
    api = _RecordingApi()
    render = GameRender(api)
    assert render.impl is None
    render.api.shutdown()
    assert api.calls == ["shutdown"]
    assert GameRender(api, impl={"k": 1}).impl == {"k": 1}