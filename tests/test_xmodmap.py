"""Unit tests for the xmodmap key table."""

import logging

import pytest

from pyxquery import (
    ExecutableNotFound,
    KeyMap,
    KeySym,
    KeyTable,
    Level,
    Modifier,
    UtilityFailed,
    XmodmapParser,
)
from pyxquery.abstract import MalformedLine
from pyxquery.xmodmap import ALL_LOWER_CASE, ALL_UPPER_CASE


class TestKeySym:
    """Test key symbol conversions."""

    def test_lookup(self) -> None:
        assert KeySym.lookup('a') is KeySym.XK_a
        assert KeySym.lookup('asciitilde') is KeySym.XK_asciitilde
        assert KeySym.lookup('NoSymbol') is None
        assert KeySym.lookup('XF86AudioMute') is None

    def test_from_char(self) -> None:
        assert KeySym.from_char('a') is KeySym.XK_a
        assert KeySym.from_char('~') is KeySym.XK_asciitilde
        assert KeySym.from_char('\t') is KeySym.XK_Tab
        assert KeySym.from_char('é') is None
        assert KeySym.from_char('ab') is None

    def test_to_char(self) -> None:
        assert KeySym.XK_a.to_char() == 'a'
        assert KeySym.XK_asciitilde.to_char() == '~'
        assert KeySym.XK_space.to_char() == ' '
        assert KeySym.XK_Shift_L.to_char() is None

    def test_letter_tuples(self) -> None:
        assert len(ALL_LOWER_CASE) == len(ALL_UPPER_CASE) == 26
        assert ALL_LOWER_CASE[0] is KeySym.XK_a
        assert ALL_UPPER_CASE[-1] is KeySym.XK_Z


class TestParseLines:
    """Test single line parsing."""

    def test_keycode(self) -> None:
        code, levels = XmodmapParser.parse_keycode('keycode  38 = a A a A')
        assert code == 38
        assert levels == {0: KeySym.XK_a, 1: KeySym.XK_A,
                          2: KeySym.XK_a, 3: KeySym.XK_A}

    def test_keycode_unknown_symbols_dropped(self) -> None:
        code, levels = XmodmapParser.parse_keycode(
            'keycode  50 = Shift_L NoSymbol XF86Foo Shift_L')
        assert code == 50
        assert levels == {0: KeySym.XK_Shift_L, 3: KeySym.XK_Shift_L}

    def test_keycode_without_symbols(self) -> None:
        assert XmodmapParser.parse_keycode('keycode   8 =') == (8, {})

    def test_modifier(self) -> None:
        mod, codes = XmodmapParser.parse_modifier(
            'shift       Shift_L (0x32),  Shift_R (0x3e)')
        assert mod is Modifier.SHIFT
        assert codes == [0x32, 0x3e]

    def test_unbound_modifier(self) -> None:
        assert XmodmapParser.parse_modifier('mod3      ') == (Modifier.MOD3, [])

    @pytest.mark.parametrize('line', [
        'xmodmap:  up to 4 keys per modifier, (keycodes in parentheses):',
        'not_a_valid_line',
        'shift       Shift_L 0x32',
        'keycode x = a',
    ])
    def test_malformed(self, line: str) -> None:
        with pytest.raises(MalformedLine):
            XmodmapParser.parse_modifier(line)


class TestKeyMap:
    """Test tables parsed from whole dumps."""

    @pytest.fixture
    def keymap(self, xmodmap_dump: str) -> KeyMap:
        return XmodmapParser.parse(xmodmap_dump)

    def test_all_keycodes_defined(self, keymap: KeyMap) -> None:
        assert list(keymap) == [
            8, 9, 10, 24, 37, 38, 50, 62, 66, 77, 87, 105, 133, 206]
        assert keymap[8].symbols == ()

    def test_get_key(self, keymap: KeyMap) -> None:
        rec = keymap.get_key(KeySym.XK_a)
        assert rec is not None
        assert rec.code == 38
        assert rec.symbols == (
            KeySym.XK_a, KeySym.XK_A, KeySym.XK_a, KeySym.XK_A)
        assert rec.modifiers == frozenset()
        assert KeySym.XK_A in rec

    def test_get_key_absent(self, keymap: KeyMap) -> None:
        assert keymap.get_key(KeySym.XK_F1) is None

    def test_get_key_shifted_symbol(self, keymap: KeyMap) -> None:
        assert keymap.get_key(KeySym.XK_exclam).code == 10
        assert keymap.get_key(KeySym.XK_KP_1).code == 87

    def test_lowest_keycode_wins(self) -> None:
        keymap = XmodmapParser.parse(
            'keycode  45 = x X\nkeycode  12 = x X\n')
        assert keymap.get_key(KeySym.XK_x).code == 12
        assert keymap.get_key(KeySym.XK_X).code == 12

    def test_lowest_keycode_wins_in_dump(self, keymap: KeyMap) -> None:
        # Meta_L sits on 206 only, Super_L on 133 only.
        assert keymap.get_key(KeySym.XK_Super_L).code == 133
        assert keymap.get_key(KeySym.XK_Meta_L).code == 206

    def test_get_modifier(self, keymap: KeyMap) -> None:
        assert keymap.get_modifier(Modifier.SHIFT) == {50, 62}
        assert keymap.get_modifier(Modifier.LOCK) == {66}
        assert keymap.get_modifier(Modifier.CONTROL) == {37, 105}
        assert keymap.get_modifier(Modifier.MOD2) == {77}
        assert keymap.get_modifier(Modifier.MOD4) == {133, 206}

    def test_unbound_modifier_is_empty(self, keymap: KeyMap) -> None:
        assert keymap.get_modifier(Modifier.MOD3) == frozenset()

    def test_undefined_keycodes_dropped(self, keymap: KeyMap) -> None:
        # Alt_L (0x40), Alt_R (0x6c) & Meta_L (0xcd) have no keycode lines.
        assert keymap.get_modifier(Modifier.MOD1) == frozenset()
        assert keymap.get_modifier(Modifier.MOD5) == frozenset()

    def test_record_modifiers(self, keymap: KeyMap) -> None:
        assert keymap[50].modifiers == {Modifier.SHIFT}
        assert keymap[133].modifiers == {Modifier.MOD4}

    def test_get_keysym(self, keymap: KeyMap) -> None:
        assert keymap.get_keysym(24) is KeySym.XK_q
        assert keymap.get_keysym(24, Level.SHIFT) is KeySym.XK_Q
        assert keymap.get_keysym(206, Level.SHIFT) is KeySym.XK_Alt_L
        assert keymap.get_keysym(206) is None
        assert keymap.get_keysym(9, Level.SHIFT) is None
        assert keymap.get_keysym(255) is None

    def test_dangling_modifier_reference(self, caplog) -> None:
        caplog.set_level(logging.DEBUG)
        keymap = XmodmapParser.parse(
            'keycode  38 = a A\nshift       Shift_L (0x32)\n')
        assert keymap.get_modifier(Modifier.SHIFT) == frozenset()
        assert keymap.get_key(KeySym.XK_a).modifiers == frozenset()
        assert 'never defined' in caplog.text

    def test_modifier_before_or_after_keycodes(self) -> None:
        keymap = XmodmapParser.parse(
            'keycode  50 = Shift_L\nshift       Shift_L (0x32)\n')
        assert keymap.get_modifier(Modifier.SHIFT) == {50}

    def test_malformed_lines_skipped(self) -> None:
        keymap = XmodmapParser.parse(
            'keycode  38 = a A\nnot_a_valid_line\nkeycode  24 = q Q\n')
        assert len(keymap) == 2

    def test_empty_dump(self) -> None:
        keymap = XmodmapParser.parse('')
        assert len(keymap) == 0
        assert keymap.get_key(KeySym.XK_a) is None
        assert keymap.get_modifier(Modifier.SHIFT) == frozenset()

    def test_levels_read_only(self, keymap: KeyMap) -> None:
        with pytest.raises(TypeError):
            keymap[38].levels[0] = KeySym.XK_b  # type: ignore[index]

    def test_levels_keep_columns(self, keymap: KeyMap) -> None:
        assert keymap[206].levels == (
            (1, KeySym.XK_Alt_L), (3, KeySym.XK_Meta_L))

    def test_records_hashable(self, xmodmap_dump: str) -> None:
        keymap = XmodmapParser.parse(xmodmap_dump)
        again = XmodmapParser.parse(xmodmap_dump)
        assert hash(keymap[50]) == hash(again[50])
        assert {keymap[50], again[50], keymap[62]} == \
            {keymap[50], keymap[62]}


class TestKeyTable:
    """Test the facade."""

    def test_reads_on_construction(self, fake_run, xmodmap_dump) -> None:
        fake_run.stdout = xmodmap_dump.encode()
        keys = KeyTable()
        assert fake_run.calls == [('xmodmap', '-pm', '-pke')]
        assert keys.get_key(KeySym.XK_a).code == 38
        assert keys.get_modifier(Modifier.SHIFT) == {50, 62}
        assert keys.get_keysym(38, Level.SHIFT) is KeySym.XK_A

    def test_prepared_keymap_skips_io(self, fake_run, xmodmap_dump) -> None:
        keys = KeyTable(XmodmapParser.parse(xmodmap_dump))
        assert fake_run.calls == []
        assert len(keys.keymap) == 14

    def test_missing_utility(self, fake_run) -> None:
        fake_run.exc = FileNotFoundError(2, 'No such file', 'xmodmap')
        with pytest.raises(ExecutableNotFound):
            KeyTable()

    def test_non_zero_exit(self, fake_run) -> None:
        fake_run.returncode = 1
        fake_run.stderr = b'xmodmap:  unable to open display\n'
        with pytest.raises(UtilityFailed) as e:
            KeyTable()
        assert e.value.returncode == 1
        assert 'unable to open display' in e.value.stderr
