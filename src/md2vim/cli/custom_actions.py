"""Custom argparse actions for argument tracking and environment defaults.

Each action records the destinations the user set explicitly in
``namespace._provided_args``, and reads its default from an ``MD2VIM_*``
environment variable named after the long option (``--cols`` reads
``MD2VIM_COLS``, ``--log-level`` reads ``MD2VIM_LOG_LEVEL``). Actions whose
default came from the environment carry ``env_provided = True`` so the option
builder can rank environment values above the configuration file.
"""

from __future__ import annotations

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import os
from typing import Any, Callable, Optional, Sequence, Union

from md2vim.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_key_for(option_strings: Sequence[str], dest: str) -> str:
    """Return the environment variable consulted for an option.

    Examples
    --------
        >>> env_key_for(["--cols"], "column_width")
        'MD2VIM_COLS'

    """
    long_options = [s for s in option_strings if s.startswith("--")]
    name = long_options[0][2:] if long_options else dest
    return f"{ENV_PREFIX}{name.upper().replace('-', '_').replace('.', '_')}"


def _mark_provided(namespace: argparse.Namespace, dest: str) -> None:
    if not hasattr(namespace, "_provided_args"):
        namespace._provided_args = set()
    namespace._provided_args.add(dest)


class TrackingStoreAction(argparse.Action):
    """Store action that tracks whether an argument was explicitly provided.

    Also supports environment variable defaults (see module docstring).
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        const: Optional[Any] = None,
        default: Optional[Any] = None,
        type: Optional[Callable[[str], Any]] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        """Initialize the tracking store action.

        Parameters
        ----------
        option_strings : Sequence[str]
            The option strings for this action
        dest : str
            The attribute name to store the value
        nargs : Optional[Union[int, str]]
            Number of arguments to consume
        const : Optional[Any]
            Constant value for special cases
        default : Optional[Any]
            Default value if not provided
        type : Optional[Any]
            Type conversion function
        choices : Optional[Sequence[Any]]
            Valid choices for the argument
        required : bool
            Whether this argument is required
        help : Optional[str]
            Help text for the argument
        metavar : Optional[Union[str, tuple[str, ...]]]
            Display name for the argument value

        """
        self.env_provided = False
        env_key = env_key_for(option_strings, dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                default = type(env_value) if type is not None else env_value
                self.env_provided = True
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            const=const,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the value and mark it as explicitly provided."""
        setattr(namespace, self.dest, values)
        _mark_provided(namespace, self.dest)


class TrackingStoreTrueAction(argparse.Action):
    """Store_true action that tracks whether the flag was explicitly provided.

    A truthy environment variable (``true``, ``1``, ``yes``, ``on``) turns
    the flag on by default.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the tracking store_true action."""
        self.env_provided = False
        env_value = os.environ.get(env_key_for(option_strings, dest))
        if env_value is not None:
            default = env_value.lower() in _TRUE_VALUES
            self.env_provided = True

        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0, const=True, default=default, required=required, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store True and mark as explicitly provided."""
        setattr(namespace, self.dest, True)
        _mark_provided(namespace, self.dest)


class TrackingStoreFalseAction(argparse.Action):
    """Store_false action that tracks whether the flag was explicitly provided.

    A truthy environment variable sets the flag, i.e. stores False by
    default: ``MD2VIM_NO_PARSE_TABLES=1`` behaves like ``--no-parse-tables``.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = True,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the tracking store_false action."""
        self.env_provided = False
        env_value = os.environ.get(env_key_for(option_strings, dest))
        if env_value is not None:
            default = env_value.lower() not in _TRUE_VALUES
            self.env_provided = True

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=False,
            default=default,
            required=required,
            help=help,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store False and mark as explicitly provided."""
        setattr(namespace, self.dest, False)
        _mark_provided(namespace, self.dest)
