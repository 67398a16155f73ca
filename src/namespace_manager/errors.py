# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************


class NamespaceError(Exception):
    """Base class for all errors raised by this package."""


class NullInputError(NamespaceError, TypeError):
    """A required argument was None."""

    def __init__(self, what: str):
        super().__init__(f"{what} must not be None")
        self.what = what


class InvalidFormatError(NamespaceError, ValueError):
    """Text does not conform to the grammar or identifier rules of a scheme."""


class IllegalStateError(NamespaceError, RuntimeError):
    """A builder or value was assembled in a way that is never valid.

    This indicates a programming error in the caller, not bad input.
    """


class UnknownNamespaceError(NamespaceError, LookupError):
    def __init__(self, namespace: str):
        super().__init__(f"unrecognized namespace: {namespace}")
        self.namespace = namespace


def require(value, what: str):
    """Return value unchanged, raising NullInputError if it is None."""
    if value is None:
        raise NullInputError(what)
    return value
