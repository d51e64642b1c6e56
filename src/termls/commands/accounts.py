"""User and group name lookup."""

import grp
import pwd
from pathlib import Path
from typing import Dict

from ..config import PASSWD_FILE, GROUP_FILE
from ..utils.logger import get_logger

logger = get_logger(__name__)


def parse_account_file(path: str) -> Dict[int, str]:
    """Read an /etc/passwd or /etc/group style file into an id -> name map.

    Blank lines and comments are skipped; malformed lines are logged and skipped.
    A missing or unreadable file yields an empty map.
    """
    table: Dict[int, str] = {}
    try:
        text = Path(path).read_text(errors='replace')
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return table

    for line_number, line in enumerate(text.splitlines(), 1):
        line = line.strip(' \t')
        if not line or line.startswith('#'):
            continue
        fields = line.split(':')
        try:
            table[int(fields[2])] = fields[0]
        except (IndexError, ValueError):
            logger.warning(f"Skipping malformed line {line_number} in {path}")
    return table


class AccountDirectory:
    """Resolves uids and gids to names, falling back to the numeric id."""

    def __init__(self, users: Dict[int, str] = None, groups: Dict[int, str] = None):
        self.users = dict(users or {})
        self.groups = dict(groups or {})

    @classmethod
    def load(cls, passwd_file: str = PASSWD_FILE, group_file: str = GROUP_FILE) -> 'AccountDirectory':
        return cls(parse_account_file(passwd_file), parse_account_file(group_file))

    def owner_name(self, uid: int) -> str:
        if uid in self.users:
            return self.users[uid]
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return str(uid)

    def group_name(self, gid: int) -> str:
        if gid in self.groups:
            return self.groups[gid]
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return str(gid)
