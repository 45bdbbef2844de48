"""Modeling modes."""

from enum import Enum


class Mode(str, Enum):
    """Whether the editor models a library's callers or the library itself.

    Application mode groups methods by the library they come from; framework
    mode groups them by package.
    """

    APPLICATION = "application"
    FRAMEWORK = "framework"
