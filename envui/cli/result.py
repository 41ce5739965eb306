#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from typing import List

from pydantic import BaseModel, Field

from ..errors import ExitCode

class CommandResult(BaseModel):
    """Outcome of a command: lines for stdout and stderr plus the exit code."""
    exit_code: int = Field(default=ExitCode.SUCCESS, description='Process exit code')
    output: List[str] = Field(default_factory=list, description='Lines for standard output')
    errors: List[str] = Field(default_factory=list, description='Lines for standard error')

    @property
    def success(self) -> bool:
        return self.exit_code == ExitCode.SUCCESS
