# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 22:11:09
# @Author : Kariko Lin

from os import PathLike


class IniError(Exception):
    """Base of all errors raised by this package."""
    pass


class IniValidationError(IniError, ValueError):
    """A group name or key got rejected."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message)
        self.argument = argument


class NullArgumentError(IniValidationError):
    def __init__(self, argument: str) -> None:
        super().__init__(argument, f'"{argument}" must not be None')


class EmptyArgumentError(IniValidationError):
    def __init__(self, argument: str) -> None:
        super().__init__(argument, f'"{argument}" must not be empty')


class BlankArgumentError(IniValidationError):
    def __init__(self, argument: str) -> None:
        super().__init__(argument, f'"{argument}" must not be blank')


class MalformedArgumentError(IniValidationError):
    def __init__(self, argument: str, candidate: object) -> None:
        super().__init__(
            argument, f'"{argument}" is malformed: {candidate!r}')
        self.candidate = candidate


class InvalidIniStructure(IniError):
    """To record errors when parsing INI text."""

    def __init__(
        self, path: str | PathLike[str] | None,
        lineno: int | None = None, reason: str | None = None
    ) -> None:
        message = f"'{path}' has invalid structure"
        if lineno is not None:
            message += f' (line {lineno})'
        if reason:
            message += f': {reason}'
        super().__init__(message)
        self.path = path
        self.lineno = lineno
