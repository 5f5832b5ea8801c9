from widgetkit.ui_runtime.keymap import map_key_name


def test_keymap_known_mappings() -> None:
    assert map_key_name("Enter") == "enter"
    assert map_key_name("RETURN") == "enter"
    assert map_key_name("Esc") == "escape"
    assert map_key_name(" ") == "space"
    assert map_key_name("Spacebar") == "space"
    assert map_key_name("ArrowDown") == "down"
    assert map_key_name("arrow_up") == "up"
    assert map_key_name("Home") == "home"
    assert map_key_name("END") == "end"


def test_keymap_unknown() -> None:
    assert map_key_name("F1") is None
    assert map_key_name("x") is None
    assert map_key_name("") is None
