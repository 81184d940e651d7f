import pytest

from pypong.settings import Settings


def test_values_for_full_hd_height():
    settings = Settings(1920, 1080)
    assert settings.ball_radius() == pytest.approx(27.0)
    assert settings.paddle_height() == pytest.approx(216.0)


def test_font_size_is_truncated_integer():
    settings = Settings(1920, 1080)
    assert settings.font_size() == 129
    assert isinstance(settings.font_size(), int)


@pytest.mark.parametrize(
    "name",
    ["ball_radius", "ball_speed_x", "ball_speed_y", "net_size", "paddle_speed", "paddle_height"],
)
def test_height_based_values_scale_with_height(name):
    small = getattr(Settings(800, 500), name)()
    large = getattr(Settings(800, 1000), name)()
    assert large == pytest.approx(2 * small)


@pytest.mark.parametrize(
    "name",
    ["ball_radius", "ball_speed_x", "ball_speed_y", "net_size", "paddle_speed", "paddle_height"],
)
def test_height_based_values_ignore_width(name):
    narrow = getattr(Settings(640, 720), name)()
    wide = getattr(Settings(2560, 720), name)()
    assert narrow == wide


def test_paddle_width_depends_only_on_width():
    assert Settings(1000, 300).paddle_width() == Settings(1000, 900).paddle_width()
    assert Settings(2000, 300).paddle_width() == pytest.approx(
        2 * Settings(1000, 300).paddle_width()
    )


def test_horizontal_speed_exceeds_vertical_speed():
    settings = Settings(1920, 1080)
    assert settings.ball_speed_x() > settings.ball_speed_y()


def test_ball_speed_y_equals_net_size():
    settings = Settings(1280, 720)
    assert settings.ball_speed_y() == settings.net_size()


def test_settings_are_immutable():
    settings = Settings(800, 600)
    before = settings.paddle_width()
    with pytest.raises(AttributeError):
        settings.width = 100  # type: ignore[misc]
    assert settings.paddle_width() == before
    assert settings.paddle_width() == pytest.approx(4.0)