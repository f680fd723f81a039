from gamecore.input import Input, Key
from gamecore.show_collision import ShowCollision


def test_starts_disabled():
    assert ShowCollision(Input()).enabled() is False


def test_toggles_on_tab_release():
    keys = Input()
    show = ShowCollision(keys)
    keys.update({Key.TAB})
    show.update(0.1)
    assert show.enabled() is False
    keys.update(set())
    show.update(0.1)
    assert show.enabled() is True
    keys.update(set())
    show.update(0.1)
    assert show.enabled() is True
    keys.update({Key.TAB})
    show.update(0.1)
    keys.update(set())
    show.update(0.1)
    assert show.enabled() is False


def test_other_keys_do_not_toggle():
    keys = Input()
    show = ShowCollision(keys)
    keys.update({Key.SPACE})
    keys.update(set())
    show.update(0.1)
    assert show.enabled() is False