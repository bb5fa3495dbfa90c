from winterplat.mouse import Mouse, MouseButton


class _FakeWindow:
    def __init__(self):
        self.calls = []

    def set_mouse_position(self, x, y):
        self.calls.append((x, y))


def test_first_update_has_no_delta():
    mouse = Mouse(_FakeWindow())
    mouse.update(10, 20)
    assert mouse.delta == (0.0, 0.0)
    assert mouse.position == (10.0, 20.0)
    assert mouse.need_enter_window is False


def test_delta_inverts_y():
    mouse = Mouse(_FakeWindow())
    mouse.update(10.0, 20.0)
    mouse.update(13.0, 15.0)
    assert mouse.delta == (13.0 - 10.0, 20.0 - 15.0)
    assert mouse.position == (13.0, 15.0)


def test_reentering_resets_reference():
    mouse = Mouse(_FakeWindow())
    mouse.update(1.0, 1.0)
    mouse.need_enter_window = True
    mouse.update(100.0, 200.0)
    assert mouse.delta == (0.0, 0.0)


def test_set_position_forwards_to_window():
    window = _FakeWindow()
    mouse = Mouse(window)
    mouse.set_position(42.0, 7.5)
    assert window.calls == [(42.0, 7.5)]


def test_button_aliases():
    assert MouseButton(MouseButton.BUTTON_1.value) is MouseButton.LEFT
    assert MouseButton(MouseButton.BUTTON_2.value) is MouseButton.RIGHT
    assert MouseButton(MouseButton.BUTTON_3.value) is MouseButton.MIDDLE
    assert MouseButton(MouseButton.LEFT.value) is MouseButton.LAST