#!/usr/bin/env python
# -*- coding: utf-8 -*-

from collections.abc import Iterable
import contextlib
from io import StringIO
import sys
from typing import Optional

from plumbum import cli

from kad_fs.application import Application
from kad_fs.test_util.io import Tee

def run(
        *,
        cmd: type[cli.Application] = Application,
        args: Iterable[str],
        expected_output: Optional[str] = None,
        expected_output_does_not_contain: Optional[str] = None,
        expected_error_code: int = 0
) -> str:
    """
    Run a kad-fs CLI command, check its exit code, and optionally check for expected output.

    This is designed to emulate how a user would run the command from the terminal,
    but runs in-process. Returns everything the command printed to stdout.
    """
    captured_output = StringIO()
    with contextlib.redirect_stdout(Tee(captured_output, sys.stdout)):
        _, error_code = cmd.run(list(args), exit=False)
    assert error_code == expected_error_code, f"Command exited with code {error_code}"
    output = captured_output.getvalue()
    if expected_output is not None and expected_output not in output:
        raise AssertionError(f"Expected '{expected_output}' in output, got: {output}")
    if expected_output_does_not_contain is not None and expected_output_does_not_contain in output:
        raise AssertionError(f"Did not expect '{expected_output_does_not_contain}' in output, got: {output}")
    return output
