import pytest

pytest.importorskip("pygame")

from kpaths.app.viewer import (  # noqa: E402
    BUTTON_GAP,
    BUTTON_H,
    BUTTON_ROWS,
    CARD_TOP,
    MAX_K,
    card_height,
    make_wall_factory,
    panel_min_height,
    screen_to_grid,
)
from kpaths.core.config import Settings  # noqa: E402


def test_screen_to_grid():
    assert screen_to_grid((16, 16), (16, 16), 40) == (0, 0)
    assert screen_to_grid((95, 60), (16, 16), 40) == (1, 1)
    assert screen_to_grid((10, 20), (16, 16), 40) == (-1, 0)


def test_seeded_factory_changes_walls_per_reset():
    factory = make_wall_factory(Settings(width=8, height=6, seed=5))
    a, b = factory(), factory()
    mask_a = [[a(x, y) for x in range(8)] for y in range(6)]
    mask_b = [[b(x, y) for x in range(8)] for y in range(6)]
    assert mask_a != mask_b

    again = make_wall_factory(Settings(width=8, height=6, seed=5))()
    assert [[again(x, y) for x in range(8)] for y in range(6)] == mask_a


def test_map_factory_repeats_the_map():
    mask = [[False, True]]
    factory = make_wall_factory(Settings(), mask)
    walls = factory()
    assert walls(1, 0) and not walls(0, 0)


@pytest.mark.parametrize("k", range(1, MAX_K + 1))
def test_metrics_card_never_reaches_the_buttons(k):
    buttons_top = CARD_TOP + card_height(MAX_K) + BUTTON_GAP
    assert CARD_TOP + card_height(k) < buttons_top
    buttons_bottom = buttons_top + BUTTON_ROWS * (BUTTON_H + BUTTON_GAP)
    assert buttons_bottom <= panel_min_height()
