"""
Permission string normalization

Raw mode strings carry the entry type and the setuid/setgid/sticky bits as
leading marker letters ('L' for symlinks, 'D' for doors, 'u'/'g'/'t'), followed
by plain rwx triples.  The canonical form is always ten characters: one type
character and three rwx triples with s/t folded into the execute positions.
"""

import stat

from ..commands.models import ModeDescriptor

PERMS = ['---', '--x', '-w-', '-wx', 'r--', 'r-x', 'rw-', 'rwx']

# Order matters: the first matching test names the type
TYPE_MARKERS = (
    (stat.S_ISDIR, 'd'),
    (stat.S_ISLNK, 'L'),
    (stat.S_ISDOOR, 'D'),
    (stat.S_ISFIFO, 'p'),
    (stat.S_ISSOCK, 's'),
    (stat.S_ISBLK, 'b'),
    (stat.S_ISCHR, 'c'),
)


def mode_string(mode: int) -> str:
    """Build the raw mode string for an st_mode value.

    >>> mode_string(0o104755)
    'urwxr-xr-x'
    """
    markers = ''
    for test, letter in TYPE_MARKERS:
        if test(mode):
            markers = letter
            break

    if mode & stat.S_ISUID:
        markers += 'u'
    if mode & stat.S_ISGID:
        markers += 'g'
    # Sticky is only meaningful on directories
    if mode & stat.S_ISVTX and stat.S_ISDIR(mode):
        markers += 't'

    triples = (
        PERMS[(mode & 0o700) >> 6] +
        PERMS[(mode & 0o070) >> 3] +
        PERMS[mode & 0o007]
    )
    return (markers or '-') + triples


def _overwrite(permissions: str, index: int, letter: str) -> str:
    if index >= len(permissions):
        return permissions
    return permissions[:index] + letter + permissions[index + 1:]


# Marker letter -> (index in the canonical string, letter written there)
FOLDED_MARKERS = {
    'u': (3, 's'),
    'g': (6, 's'),
    't': (9, 't'),
}


def _fold_markers(permissions: str) -> str:
    """'dgtrwxrwxrwx' -> 'drwxrwsrwt'."""
    folded = permissions[0] + permissions[-9:]
    for marker in permissions[1:-9]:
        if marker in FOLDED_MARKERS:
            index, letter = FOLDED_MARKERS[marker]
            folded = _overwrite(folded, index, letter)
    return folded


def normalize_permissions(descriptor: ModeDescriptor) -> str:
    """Convert a raw mode string into the canonical 10-character form."""
    permissions = descriptor.mode_string
    if not permissions:
        return permissions

    if descriptor.is_symlink:
        permissions = permissions.replace('L', 'l', 1)
    elif permissions[0] == 'D':
        permissions = permissions[1:]
        if len(permissions) == 9:
            permissions = '-' + permissions
    elif permissions[:2] == 'ug':
        permissions = permissions.replace('ug', '-', 1)
        permissions = _overwrite(_overwrite(permissions, 3, 's'), 6, 's')
    elif permissions[0] == 'u':
        permissions = _overwrite(permissions.replace('u', '-', 1), 3, 's')
    elif permissions[0] == 'g':
        permissions = _overwrite(permissions.replace('g', '-', 1), 6, 's')
    elif permissions[:2] == 'dt':
        permissions = permissions.replace('dt', 'd', 1)
        permissions = permissions[:-1] + 't'

    # Marker combinations without a rule (e.g. setgid directories) keep the type
    # letter and fold the remaining markers into the triples
    if len(permissions) > 10:
        permissions = _fold_markers(permissions)
    return permissions
