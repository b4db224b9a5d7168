# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/13 20:11:36
# @Author : Kariko Lin

from enum import Enum
from string import ascii_lowercase, ascii_uppercase

# printable chars whose keysym names differ from the chars themselves.
_CHAR_NAMES = {
    ' ': 'space',
    '!': 'exclam',
    '"': 'quotedbl',
    '#': 'numbersign',
    '$': 'dollar',
    '%': 'percent',
    '&': 'ampersand',
    "'": 'apostrophe',
    '(': 'parenleft',
    ')': 'parenright',
    '*': 'asterisk',
    '+': 'plus',
    ',': 'comma',
    '-': 'minus',
    '.': 'period',
    '/': 'slash',
    ':': 'colon',
    ';': 'semicolon',
    '<': 'less',
    '=': 'equal',
    '>': 'greater',
    '?': 'question',
    '@': 'at',
    '[': 'bracketleft',
    '\\': 'backslash',
    ']': 'bracketright',
    '^': 'asciicircum',
    '_': 'underscore',
    '`': 'grave',
    '{': 'braceleft',
    '|': 'bar',
    '}': 'braceright',
    '~': 'asciitilde',
    '\b': 'BackSpace',
    '\t': 'Tab',
    '\x1b': 'Escape',
}
_NAME_CHARS = {v: k for k, v in _CHAR_NAMES.items()}


class KeySym(str, Enum):
    """Key symbols we know about, valued by the names xmodmap prints.

    The set is closed on purpose: names missing here (`NoSymbol` included)
    are dropped while parsing and never become a member.
    """
    XK_a = 'a'
    XK_b = 'b'
    XK_c = 'c'
    XK_d = 'd'
    XK_e = 'e'
    XK_f = 'f'
    XK_g = 'g'
    XK_h = 'h'
    XK_i = 'i'
    XK_j = 'j'
    XK_k = 'k'
    XK_l = 'l'
    XK_m = 'm'
    XK_n = 'n'
    XK_o = 'o'
    XK_p = 'p'
    XK_q = 'q'
    XK_r = 'r'
    XK_s = 's'
    XK_t = 't'
    XK_u = 'u'
    XK_v = 'v'
    XK_w = 'w'
    XK_x = 'x'
    XK_y = 'y'
    XK_z = 'z'
    XK_A = 'A'
    XK_B = 'B'
    XK_C = 'C'
    XK_D = 'D'
    XK_E = 'E'
    XK_F = 'F'
    XK_G = 'G'
    XK_H = 'H'
    XK_I = 'I'
    XK_J = 'J'
    XK_K = 'K'
    XK_L = 'L'
    XK_M = 'M'
    XK_N = 'N'
    XK_O = 'O'
    XK_P = 'P'
    XK_Q = 'Q'
    XK_R = 'R'
    XK_S = 'S'
    XK_T = 'T'
    XK_U = 'U'
    XK_V = 'V'
    XK_W = 'W'
    XK_X = 'X'
    XK_Y = 'Y'
    XK_Z = 'Z'
    XK_0 = '0'
    XK_1 = '1'
    XK_2 = '2'
    XK_3 = '3'
    XK_4 = '4'
    XK_5 = '5'
    XK_6 = '6'
    XK_7 = '7'
    XK_8 = '8'
    XK_9 = '9'
    XK_space = 'space'
    XK_exclam = 'exclam'
    XK_quotedbl = 'quotedbl'
    XK_numbersign = 'numbersign'
    XK_dollar = 'dollar'
    XK_percent = 'percent'
    XK_ampersand = 'ampersand'
    XK_apostrophe = 'apostrophe'
    XK_parenleft = 'parenleft'
    XK_parenright = 'parenright'
    XK_asterisk = 'asterisk'
    XK_plus = 'plus'
    XK_comma = 'comma'
    XK_minus = 'minus'
    XK_period = 'period'
    XK_slash = 'slash'
    XK_colon = 'colon'
    XK_semicolon = 'semicolon'
    XK_less = 'less'
    XK_equal = 'equal'
    XK_greater = 'greater'
    XK_question = 'question'
    XK_at = 'at'
    XK_bracketleft = 'bracketleft'
    XK_backslash = 'backslash'
    XK_bracketright = 'bracketright'
    XK_asciicircum = 'asciicircum'
    XK_underscore = 'underscore'
    XK_grave = 'grave'
    XK_braceleft = 'braceleft'
    XK_bar = 'bar'
    XK_braceright = 'braceright'
    XK_asciitilde = 'asciitilde'

    # TTY function keys & motion
    XK_BackSpace = 'BackSpace'
    XK_Tab = 'Tab'
    XK_ISO_Left_Tab = 'ISO_Left_Tab'
    XK_Linefeed = 'Linefeed'
    XK_Clear = 'Clear'
    XK_Return = 'Return'
    XK_Pause = 'Pause'
    XK_Scroll_Lock = 'Scroll_Lock'
    XK_Sys_Req = 'Sys_Req'
    XK_Escape = 'Escape'
    XK_Delete = 'Delete'
    XK_Home = 'Home'
    XK_Left = 'Left'
    XK_Up = 'Up'
    XK_Right = 'Right'
    XK_Down = 'Down'
    XK_Prior = 'Prior'
    XK_Next = 'Next'
    XK_End = 'End'
    XK_Begin = 'Begin'
    XK_Print = 'Print'
    XK_Insert = 'Insert'
    XK_Menu = 'Menu'
    XK_Break = 'Break'
    XK_F1 = 'F1'
    XK_F2 = 'F2'
    XK_F3 = 'F3'
    XK_F4 = 'F4'
    XK_F5 = 'F5'
    XK_F6 = 'F6'
    XK_F7 = 'F7'
    XK_F8 = 'F8'
    XK_F9 = 'F9'
    XK_F10 = 'F10'
    XK_F11 = 'F11'
    XK_F12 = 'F12'
    XK_F13 = 'F13'
    XK_F14 = 'F14'
    XK_F15 = 'F15'
    XK_F16 = 'F16'
    XK_F17 = 'F17'
    XK_F18 = 'F18'
    XK_F19 = 'F19'
    XK_F20 = 'F20'
    XK_F21 = 'F21'
    XK_F22 = 'F22'
    XK_F23 = 'F23'
    XK_F24 = 'F24'

    # modifiers
    XK_Shift_L = 'Shift_L'
    XK_Shift_R = 'Shift_R'
    XK_Control_L = 'Control_L'
    XK_Control_R = 'Control_R'
    XK_Caps_Lock = 'Caps_Lock'
    XK_Shift_Lock = 'Shift_Lock'
    XK_Meta_L = 'Meta_L'
    XK_Meta_R = 'Meta_R'
    XK_Alt_L = 'Alt_L'
    XK_Alt_R = 'Alt_R'
    XK_Super_L = 'Super_L'
    XK_Super_R = 'Super_R'
    XK_Hyper_L = 'Hyper_L'
    XK_Hyper_R = 'Hyper_R'
    XK_Num_Lock = 'Num_Lock'
    XK_Mode_switch = 'Mode_switch'
    XK_ISO_Level3_Shift = 'ISO_Level3_Shift'
    XK_ISO_Level5_Shift = 'ISO_Level5_Shift'
    XK_ISO_Next_Group = 'ISO_Next_Group'

    # keypad
    XK_KP_0 = 'KP_0'
    XK_KP_1 = 'KP_1'
    XK_KP_2 = 'KP_2'
    XK_KP_3 = 'KP_3'
    XK_KP_4 = 'KP_4'
    XK_KP_5 = 'KP_5'
    XK_KP_6 = 'KP_6'
    XK_KP_7 = 'KP_7'
    XK_KP_8 = 'KP_8'
    XK_KP_9 = 'KP_9'
    XK_KP_Space = 'KP_Space'
    XK_KP_Tab = 'KP_Tab'
    XK_KP_Enter = 'KP_Enter'
    XK_KP_Home = 'KP_Home'
    XK_KP_Left = 'KP_Left'
    XK_KP_Up = 'KP_Up'
    XK_KP_Right = 'KP_Right'
    XK_KP_Down = 'KP_Down'
    XK_KP_Prior = 'KP_Prior'
    XK_KP_Next = 'KP_Next'
    XK_KP_End = 'KP_End'
    XK_KP_Begin = 'KP_Begin'
    XK_KP_Insert = 'KP_Insert'
    XK_KP_Delete = 'KP_Delete'
    XK_KP_Equal = 'KP_Equal'
    XK_KP_Multiply = 'KP_Multiply'
    XK_KP_Add = 'KP_Add'
    XK_KP_Separator = 'KP_Separator'
    XK_KP_Subtract = 'KP_Subtract'
    XK_KP_Decimal = 'KP_Decimal'
    XK_KP_Divide = 'KP_Divide'

    @classmethod
    def lookup(cls, name: str) -> 'KeySym | None':
        """From xmodmap entry to KeySym, `None` if we don't know it."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def from_char(cls, ch: str) -> 'KeySym | None':
        if len(ch) != 1:
            return None
        return cls.lookup(_CHAR_NAMES.get(ch, ch))

    def to_char(self) -> str | None:
        # single char names are exactly letters & digits.
        if len(self.value) == 1:
            return self.value
        return _NAME_CHARS.get(self.value)


class Modifier(str, Enum):
    SHIFT = 'shift'
    LOCK = 'lock'
    CONTROL = 'control'
    MOD1 = 'mod1'
    MOD2 = 'mod2'
    MOD3 = 'mod3'
    MOD4 = 'mod4'
    MOD5 = 'mod5'


class Level(int, Enum):
    """Columns of `xmodmap -pke`, i.e. which modifiers pick the symbol."""
    KEY = 0
    SHIFT = 1
    MODE_SWITCH = 2
    MODE_SWITCH_SHIFT = 3
    ISO_LEVEL3 = 4
    ISO_LEVEL3_SHIFT = 5


ALL_LOWER_CASE = tuple(KeySym(i) for i in ascii_lowercase)
ALL_UPPER_CASE = tuple(KeySym(i) for i in ascii_uppercase)
