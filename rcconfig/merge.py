# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Combines config file tokens with invocation tokens.

File tokens are placed right after the program name and before the real
command-line arguments. The matcher keeps the last occurrence of a non-repeatable
option, so command-line values override file values without any extra logic, and
repeatable options list file values before command-line values.
"""
from __future__ import annotations

from typing import Sequence


def merge_tokens(invocation: Sequence[str], file_tokens: Sequence[str]) -> list[str]:
    """
    Return the token list to match.

    Args:
        invocation (Sequence[str]): Invocation tokens, starting with the program name.
        file_tokens (Sequence[str]): Tokens loaded from the config file.

    Raises:
        ValueError: If `invocation` is empty.
    """
    if not invocation:
        raise ValueError("invocation must contain at least the program name")
    if not file_tokens:
        return list(invocation)
    return [invocation[0], *file_tokens, *invocation[1:]]
