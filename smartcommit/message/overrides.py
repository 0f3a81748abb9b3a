"""Header overrides for generated commit messages.

The type and scope overrides rewrite only the first line and work by
locating the first '(' or ':' in it, so free-form backend output that
doesn't look like a conventional header passes through untouched.
"""

from smartcommit.message.model import parse_header, truncate_title


def override_type(message: str, new_type: str) -> str:
    """Replace the commit type on the first line of message."""
    lines = message.split('\n')
    header = lines[0]

    if '(' in header:
        lines[0] = new_type + header[header.index('('):]
    elif ':' in header:
        lines[0] = new_type + header[header.index(':'):]

    return '\n'.join(lines)


def override_scope(message: str, new_scope: str) -> str:
    """Replace the scope on the first line of message, adding one if missing."""
    lines = message.split('\n')
    header = lines[0]

    if '(' in header:
        type_end = header.index('(')
        scope_end = header.find(')')
        if scope_end < type_end:
            return message
        lines[0] = f"{header[:type_end]}({new_scope}){header[scope_end + 1:]}"
    elif ':' in header:
        colon = header.index(':')
        lines[0] = f"{header[:colon]}({new_scope}){header[colon:]}"

    return '\n'.join(lines)


def limit_title(message: str, max_len: int) -> str:
    """Truncate the title on the first line so it fits in max_len characters.

    Lines that don't parse as a conventional header are left alone.
    """
    lines = message.split('\n')
    first = lines[0].rstrip()
    header = parse_header(first)
    if header is None or not header.title:
        return message

    prefix = first[:len(first) - len(header.title)]
    lines[0] = prefix + truncate_title(header.title, max_len)
    return '\n'.join(lines)
