# src/snippet_kit/replace/template.py

"""Expansion of ``$``-style replacement templates.

The editor's find/replace syntax refers to groups with ``$1``, not with
Python's ``\\1``, and treats backslashes literally. Templates are therefore
expanded by hand against each match instead of through ``re.sub``'s own
template language:

- ``$$`` inserts a literal ``$``
- ``$&`` inserts the whole match
- ``$``` and ``$'`` insert the text before and after the match
- ``$n`` / ``$nn`` insert group n (two digits win when that group exists)
- ``$<name>`` inserts a named group

Groups that did not participate expand to the empty string. Any other
``$`` sequence is copied as is.
"""

import re

_TOKEN_RE = re.compile(r"\$(?:([$&`'])|(\d\d?)|<([^>]*)>)")


def expand_template(template: str, match: re.Match[str]) -> str:
    group_count = match.re.groups
    named_groups = match.re.groupindex

    def expand(token: re.Match[str]) -> str:
        symbol, digits, name = token.groups()
        if symbol == "$":
            return "$"
        if symbol == "&":
            return match.group(0)
        if symbol == "`":
            return match.string[: match.start()]
        if symbol == "'":
            return match.string[match.end() :]
        if digits is not None:
            if len(digits) == 2 and 0 < int(digits) <= group_count:
                return match.group(int(digits)) or ""
            if 0 < int(digits[0]) <= group_count:
                return (match.group(int(digits[0])) or "") + digits[1:]
            return token.group(0)
        if named_groups:
            if name not in named_groups:
                return ""
            return match.group(name) or ""
        return token.group(0)

    return _TOKEN_RE.sub(expand, template)
