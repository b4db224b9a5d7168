"""
Shared dumps and a stub for the dump utilities.
"""

import subprocess

import pytest

XRDB_DUMP = """\
! generated by xrdb -query
*background:\t#1d2021
*foreground:\t#ebdbb2
URxvt*font:\txft:Hack:size=10
URxvt.scrollBar:\tfalse
Xft.dpi:\t96
dwm.color1:\t#282828
XTerm*vt100.translations:\t#override \\
Ctrl <Key>C: copy-selection(CLIPBOARD)
"""

XMODMAP_DUMP = """\
xmodmap:  up to 4 keys per modifier, (keycodes in parentheses):

shift       Shift_L (0x32),  Shift_R (0x3e)
lock        Caps_Lock (0x42)
control     Control_L (0x25),  Control_R (0x69)
mod1        Alt_L (0x40),  Alt_R (0x6c),  Meta_L (0xcd)
mod2        Num_Lock (0x4d)
mod3
mod4        Super_L (0x85),  Super_R (0x86),  Super_L (0xce),  Hyper_L (0xcf)
mod5        ISO_Level3_Shift (0x5c),  Mode_switch (0xcb)

keycode   8 =
keycode   9 = Escape NoSymbol Escape
keycode  10 = 1 exclam 1 exclam
keycode  24 = q Q q Q
keycode  37 = Control_L NoSymbol Control_L
keycode  38 = a A a A
keycode  50 = Shift_L NoSymbol Shift_L
keycode  62 = Shift_R NoSymbol Shift_R
keycode  66 = Caps_Lock NoSymbol Caps_Lock
keycode  77 = Num_Lock NoSymbol Num_Lock
keycode  87 = KP_End KP_1 KP_End KP_1
keycode 105 = Control_R NoSymbol Control_R
keycode 133 = Super_L NoSymbol Super_L
keycode 206 = NoSymbol Alt_L NoSymbol Meta_L
"""


class FakeRun:
    """Stands in for `subprocess.run`, remembering what was asked."""

    def __init__(self, stdout=b'', returncode=0, stderr=b'', exc=None):
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr
        self.exc = exc
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(tuple(args))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(
            args, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def xrdb_dump():
    return XRDB_DUMP


@pytest.fixture
def xmodmap_dump():
    return XMODMAP_DUMP


@pytest.fixture
def fake_run(monkeypatch):
    """Patch the process call; tweak the returned object before use."""
    run = FakeRun()
    monkeypatch.setattr('pyxquery.abstract.subprocess.run', run)
    return run
