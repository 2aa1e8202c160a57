r"""
Scanner String Extraction Stages

The scanner string grammar is:

    <weight block><pcs digit><code>

    12.500*2.500*10.000 1 ABC123
    \_________________/ | \____/
       weight block    pcs  code

The code starts at the first letter. The piece count is the nearest digit
before the code (separators in between are ignored). Everything before the
piece count is the weight block, which is cleaned down to digits and dots.

Each stage returns a StageResult instead of raising, so the pipeline can
stop at the first failure and report that stage's message.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .models import MSG_NO_CODE, MSG_NO_PCS, MSG_NO_WEIGHT_DATA


T = TypeVar("T")

_LETTER = re.compile(r'[A-Za-z]')
_DIGIT = re.compile(r'[0-9]')
_WHITESPACE = re.compile(r'\s+')
_DOT_RUN = re.compile(r'\.{2,}')
_NOT_WEIGHT_CHAR = re.compile(r'[^0-9.]')


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of one extraction stage: a value or an error message."""
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StageResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "StageResult[T]":
        return cls(error=error)


@dataclass(frozen=True)
class CodeMatch:
    """Item code and the index where it starts."""
    code: str
    start: int


@dataclass(frozen=True)
class PiecesMatch:
    """Piece count digit and its index."""
    pieces: int
    index: int


def extract_code(text: str) -> StageResult[CodeMatch]:
    """
    Find the item code: everything from the first letter to the end.

    Example:
        >>> extract_code("12.5002.50010.0001ABC123").value
        CodeMatch(code='ABC123', start=18)
    """
    match = _LETTER.search(text)
    if match is None:
        return StageResult.failure(MSG_NO_CODE)

    start = match.start()
    return StageResult.success(CodeMatch(code=text[start:], start=start))


def extract_pieces(text: str, code_start: int) -> StageResult[PiecesMatch]:
    """
    Find the piece count by scanning backwards from just before the code.

    Spaces, dots and symbols between the digit and the code are skipped.
    Only a single digit is read.
    """
    for index in range(code_start - 1, -1, -1):
        char = text[index]
        if _DIGIT.fullmatch(char):
            return StageResult.success(PiecesMatch(pieces=int(char), index=index))

    return StageResult.failure(MSG_NO_PCS)


def clean_weight_block(raw_block: str) -> str:
    """
    Normalize the weight block to digits and dots.

    Steps (order matters):
    1. Remove whitespace
    2. Collapse runs of dots to a single dot
    3. Drop anything that is not a digit or a dot
    4. Prefix "0" when the block starts with a dot
    """
    cleaned = _WHITESPACE.sub('', raw_block)

    while '..' in cleaned:
        cleaned = _DOT_RUN.sub('.', cleaned)

    cleaned = _NOT_WEIGHT_CHAR.sub('', cleaned)

    if cleaned.startswith('.'):
        cleaned = '0' + cleaned

    return cleaned


def extract_weight_block(text: str, pcs_index: int) -> StageResult[str]:
    """Clean the part of the input before the piece count."""
    cleaned = clean_weight_block(text[:pcs_index])

    if cleaned in ('', '.'):
        return StageResult.failure(MSG_NO_WEIGHT_DATA)

    return StageResult.success(cleaned)
