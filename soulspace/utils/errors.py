# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


class SoulSpaceError(Exception):
    """Base class for failures raised by the wellness core."""


class ValidationError(SoulSpaceError):
    """Input rejected before any state changed."""


class InvalidArgument(ValidationError):
    """A countdown was asked to run for a non-positive duration."""


class StorageUnavailable(SoulSpaceError):
    """The local storage medium could not be read or written."""
