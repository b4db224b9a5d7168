# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/14 19:52:13
# @Author : Kariko Lin

"""Dump X resources or the keyboard table.

Small script to see what the parsers actually got out of
`xrdb -query` and `xmodmap -pm -pke`.
"""

import argparse
import logging
import sys
from typing import TypeVar

import yaml

from .abstract import CommandHandler, InvocationError
from .xmodmap import (
    KeyMap,
    KeyRecord,
    KeySym,
    KeyTable,
    Modifier,
    XmodmapParser
)
from .xrdb import ResourceTable, Xrdb, XrdbParser

T = TypeVar('T')


def from_file(parser: CommandHandler[T], infile: str) -> T:
    # saved dumps get the same decoding fallbacks as live output.
    with open(infile, 'rb') as fp:
        return parser.parse(parser.decode(fp.read()))


def resources_to_dict(table: ResourceTable) -> dict[str, dict[str, str]]:
    ret: dict[str, dict[str, str]] = {}
    for comp, prop, val in table.entries():
        ret.setdefault(comp, {})[prop] = val
    return ret


# safe_dump refuses str subclasses, so enums go out by value.
def record_to_dict(rec: KeyRecord) -> dict[str, list[str]]:
    return {
        'symbols': [i.value for i in rec.symbols],
        'modifiers': sorted(i.value for i in rec.modifiers),
    }


def keymap_to_dict(keymap: KeyMap) -> dict[str, dict]:
    return {
        'keys': {code: record_to_dict(rec) for code, rec in keymap.items()},
        'modifiers': {
            i.value: sorted(keymap.get_modifier(i)) for i in Modifier},
    }


def dump(data: object) -> None:
    yaml.safe_dump(data, sys.stdout, allow_unicode=True, sort_keys=False)


def run_xrdb(args: argparse.Namespace) -> int:
    if args.input is None:
        xrdb = Xrdb()
        xrdb.read()
        table = xrdb.table
    else:
        table = from_file(XrdbParser(), args.input)

    if args.component is None:
        dump(resources_to_dict(table))
        return 0
    if args.property is None:
        dump(resources_to_dict(table).get(args.component, {}))
        return 0

    val = table.query(args.component, args.property)
    if val is None and args.fallback:
        val = table.query_universal(args.property)
    if val is None:
        return 1
    print(val)
    return 0


def run_xmodmap(args: argparse.Namespace) -> int:
    keys = KeyTable(
        None if args.input is None
        else from_file(XmodmapParser(), args.input))

    if args.key is not None:
        if (rec := keys.get_key(args.key)) is None:
            return 1
        dump({rec.code: record_to_dict(rec)})
    elif args.modifier is not None:
        dump(sorted(keys.get_modifier(args.modifier)))
    else:
        dump(keymap_to_dict(keys.keymap))
    return 0


def keysym_arg(name: str) -> KeySym:
    if (ret := KeySym.lookup(name)) is None:
        raise argparse.ArgumentTypeError(f'unknown key symbol: {name}')
    return ret


def make_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='pyxquery', description=__doc__)
    parser.add_argument(
        '--loglevel', default='info',
        choices=['debug', 'info', 'warning', 'error', 'critical'],
        help='root logger level. Default: %(default)s')
    commands = parser.add_subparsers(dest='command', required=True)

    res = commands.add_parser('xrdb', help='X resource database.')
    res.add_argument('component', nargs='?', help='e.g. URxvt, dwm')
    res.add_argument('property', nargs='?', help='e.g. background')
    res.add_argument(
        '--fallback', action='store_true',
        help='fall back to the universal `*property` resource on a miss.')
    res.add_argument('--input', help='parse a saved dump instead of xrdb.')
    res.set_defaults(func=run_xrdb)

    kbd = commands.add_parser('xmodmap', help='keyboard mapping.')
    group = kbd.add_mutually_exclusive_group()
    group.add_argument('--key', type=keysym_arg, help='e.g. a, Shift_L')
    group.add_argument(
        '--modifier', type=Modifier, choices=list(Modifier),
        metavar='{' + ','.join(i.value for i in Modifier) + '}')
    kbd.add_argument('--input', help='parse a saved dump instead of xmodmap.')
    kbd.set_defaults(func=run_xmodmap)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = make_argparser().parse_args(argv)
    logging.getLogger().setLevel(getattr(logging, args.loglevel.upper()))
    try:
        return args.func(args)
    except InvocationError as e:
        logging.error(e)
        return 2


if __name__ == '__main__':
    sys.exit(main())
