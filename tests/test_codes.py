import string

import pytest

from nodens.codes import Key, MouseButton


def test_fixed_key_values():
    assert Key(32) is Key.SPACE
    assert Key(256) is Key.ESCAPE
    assert Key(348) is Key.MENU


def test_last_key_is_menu():
    assert Key(348) is Key.LAST
    assert Key(348) is Key.MENU


@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_letters_match_ascii(letter):
    assert Key(ord(letter)) is Key[letter]


@pytest.mark.parametrize("digit", list(string.digits))
def test_digits_match_ascii(digit):
    assert Key(ord(digit)) is Key[f"DIGIT_{digit}"]


def test_punctuation_matches_ascii():
    pairs = {
        Key.APOSTROPHE: "'",
        Key.COMMA: ",",
        Key.MINUS: "-",
        Key.PERIOD: ".",
        Key.SLASH: "/",
        Key.SEMICOLON: ";",
        Key.EQUAL: "=",
        Key.LEFT_BRACKET: "[",
        Key.BACKSLASH: "\\",
        Key.RIGHT_BRACKET: "]",
        Key.GRAVE_ACCENT: "`",
    }
    for key, char in pairs.items():
        assert Key(ord(char)) is key


def test_function_keys_are_contiguous():
    looked_up = [Key(code) for code in range(290, 315)]
    assert looked_up == [Key[f"F{n}"] for n in range(1, 26)]
    assert Key(314) is Key.F25


def test_keypad_digits_are_contiguous():
    looked_up = [Key(code) for code in range(320, 330)]
    assert looked_up == [Key[f"KP_{n}"] for n in range(10)]


def test_keys_are_ints():
    assert Key.A + 1 == Key.B
    assert Key(65) is Key.A


def test_mouse_button_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(7) is MouseButton.LAST
    assert MouseButton(0) is MouseButton.BUTTON_1
    assert MouseButton(7) is MouseButton.BUTTON_8


def test_mouse_button_values():
    looked_up = [MouseButton(code) for code in range(8)]
    assert [int(b) for b in looked_up] == list(range(8))
    assert looked_up == list(MouseButton)
    assert MouseButton(0) == 0
    assert MouseButton(7) == 7


def test_unknown_code_raises():
    with pytest.raises(ValueError):
        MouseButton(8)