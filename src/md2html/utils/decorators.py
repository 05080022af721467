#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/decorators.py
"""Utility decorators for md2html.

This module provides the dependency guard used by the engine for optional
parser plugins, and a DEBUG-level timing helper used by the converter.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from md2html.exceptions import DependencyError
from md2html.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before function execution.

    Parameters
    ----------
    converter_name : str
        Name of the feature (e.g., "autolink", "footnotes"). This appears in
        error messages to help users identify which feature needs dependencies.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "linkify-it-py")
        - import_name: Module name for import statement (e.g., "linkify_it")
        - version_spec: Version requirement (e.g., ">=2.0.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated function that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
    Guard a helper that enables an optional markdown-it plugin:

        >>> @requires_dependencies("autolink", [("linkify-it-py", "linkify_it", ">=2.0.0")])
        ... def enable_autolink(md):
        ...     md.enable("linkify")

    Notes
    -----
    - The original ImportError is preserved for debugging
    - All missing packages and version mismatches are collected before raising

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)

                    if version_spec:
                        meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                        if not meets_requirement:
                            version_str = installed_version or "unknown"
                            version_mismatches.append((install_name, version_spec, version_str))

                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "CommonMark render")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "CommonMark render"):
        ...     html = engine.render(text)
        ... # Logs: "CommonMark render completed in 0.01s" at DEBUG level

    Notes
    -----
    - Only measures time when logger has DEBUG level enabled
    - Zero overhead when DEBUG logging is disabled

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
