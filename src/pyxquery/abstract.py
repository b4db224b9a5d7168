# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 21:40:17
# @Author : Kariko Lin

import codecs
import logging
import subprocess
from abc import ABCMeta, abstractmethod
from io import StringIO, TextIOBase
from locale import getpreferredencoding
from typing import Generic, TypeVar

import chardet

T = TypeVar('T')


class InvocationError(Exception):
    """The dump utility could not be run, or did not exit cleanly."""
    pass


class ExecutableNotFound(InvocationError):
    def __init__(self, command: str, reason: OSError) -> None:
        super().__init__(
            f'could not run "{command}", are you sure it is installed? '
            f'({reason})')
        self.command = command


class UtilityFailed(InvocationError):
    def __init__(self, command: str, returncode: int, stderr: str) -> None:
        super().__init__(
            f'"{command}" exited with status {returncode}: {stderr.strip()}')
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class NotLoadedError(RuntimeError):
    """Queried a table before any successful read."""
    pass


class MalformedLine(ValueError):
    """A single dump line did not match the expected shape.

    Only raised by per-line parsers; `readstream()` always swallows it.
    """
    pass


class CommandHandler(Generic[T], metaclass=ABCMeta):
    """Runs a dump utility and parses what it prints into a `T`.

    Nothing is written back, so unlike file handlers there's no `write()`.
    """

    def __init__(self, *command: str, encoding: str | None = None) -> None:
        """`encoding` of the utility's output, `None` for locale default.

        Raises `LookupError` right away if Python doesn't know the codec.
        """
        if encoding is not None:
            codecs.lookup(encoding)
        self._cmd = command
        self._codec = encoding

    @staticmethod
    @abstractmethod
    def readstream(buf: TextIOBase) -> T:
        raise NotImplementedError

    @classmethod
    def parse(cls, text: str) -> T:
        """Parse a dump captured elsewhere, no process involved."""
        return cls.readstream(StringIO(text))

    def decode(self, raw: bytes) -> str:
        # when encoding is None, fallback to locale default,
        # and when it got wrong, let `chardet` guess.
        try:
            return raw.decode(self._codec or getpreferredencoding(False))
        except UnicodeDecodeError:
            pass

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            # latin-1 maps every byte, so this never fails.
            return raw.decode('latin-1')

    def _run(self) -> StringIO:
        """Run the command to completion and hand back its stdout.

        `subprocess.run()` waits for the exit status and drains both pipes,
        so nothing half-read ever reaches the parser.
        """
        try:
            proc = subprocess.run(self._cmd, capture_output=True, check=False)
        except OSError as e:
            logging.warning(f'failed to spawn "{self}": {e}')
            raise ExecutableNotFound(str(self), e) from e

        if proc.returncode != 0:
            err = self.decode(proc.stderr)
            logging.warning(f'"{self}" exited with {proc.returncode}')
            raise UtilityFailed(str(self), proc.returncode, err)
        return StringIO(self.decode(proc.stdout))

    def read(self) -> T:
        return self.readstream(self._run())

    def __str__(self) -> str:
        return ' '.join(self._cmd)
