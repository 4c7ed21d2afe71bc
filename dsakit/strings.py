"""String helpers: length, reversal and case-insensitive palindromes."""

from __future__ import annotations


def name_length(name: str) -> int:
    """Return the number of characters before the first NUL, if any."""
    return len(name.partition("\0")[0])


def reverse_name(name: str) -> str:
    """Return ``name`` with its characters in reverse order."""
    chars = list(name)
    i, j = 0, len(chars) - 1
    while i < j:
        chars[i], chars[j] = chars[j], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def change_case(ch: str) -> str:
    """Lower-case an ASCII capital letter; return any other character as is."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if "A" <= ch <= "Z":
        return chr(ord(ch) - ord("A") + ord("a"))
    return ch


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def check_palindrome(text: str) -> bool:
    """Report whether ``text`` is a palindrome.

    Only ASCII letters and digits count, and letter case is ignored.
    """
    i, j = 0, len(text) - 1
    while i < j:
        while i < j and not _is_ascii_alnum(text[i]):
            i += 1
        while i < j and not _is_ascii_alnum(text[j]):
            j -= 1
        if change_case(text[i]) != change_case(text[j]):
            return False
        i += 1
        j -= 1
    return True