#!/usr/bin/env python3

"""Exceptions raised by the vtable configuration layer."""


class VtableConfigError(Exception):
    """Base class for all vtable configuration errors."""


class MalformedInputError(VtableConfigError, ValueError):
    """A JSON value does not have the structure required at its root.

    Only structurally wrong roots are fatal; missing or mistyped fields
    inside an otherwise valid object resolve to defaults instead.
    """

    def __init__(self, context: str, message: str):
        self.context = context
        super().__init__(f"{context}: {message}")
