"""Active Directory account source over LDAP."""

import logging
from typing import Dict, List, Optional

import ldap
from ldap.controls import SimplePagedResultsControl

from pwnotify.config.run_config import DirectoryConfig
from pwnotify.models.account_record import AccountRecord
from pwnotify.utils.time_utils import InvalidTimestampError, filetime_to_datetime

from .base import DirectorySource, DirectorySourceError

logger = logging.getLogger(__name__)

ATTRIBUTES = [
    "sAMAccountName",
    "displayName",
    "mail",
    "pwdLastSet",
    "userAccountControl",
]

PAGE_SIZE = 500


def _first(attrs: Dict[str, list], name: str) -> Optional[str]:
    values = attrs.get(name) or []
    if not values:
        return None
    value = values[0]
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return value


def entry_to_account(attrs: Dict[str, list]) -> Optional[AccountRecord]:
    """
    Convert an LDAP entry into an AccountRecord.

    Returns:
        AccountRecord, or None if the entry has no account name

    Notes:
        - pwdLastSet is converted from FILETIME when possible; otherwise
          the raw value is kept and fails later, for this account only
        - A missing userAccountControl is treated as 0 (not a normal account)
    """
    account_name = _first(attrs, "sAMAccountName")
    if not account_name:
        return None

    raw_last_set = _first(attrs, "pwdLastSet")
    try:
        password_last_set = filetime_to_datetime(int(raw_last_set))
    except (TypeError, ValueError, InvalidTimestampError):
        password_last_set = raw_last_set

    try:
        flags = int(_first(attrs, "userAccountControl") or 0)
    except ValueError:
        flags = 0

    return AccountRecord(
        account_name=account_name,
        display_name=_first(attrs, "displayName") or account_name,
        mail_address=_first(attrs, "mail") or "",
        password_last_set=password_last_set,
        account_control_flags=flags,
    )


class LdapDirectorySource(DirectorySource):
    """Fetches user accounts from an LDAP / Active Directory server."""

    def __init__(self, config: DirectoryConfig):
        self.config = config

    def _connect(self):
        conn = ldap.initialize(self.config.uri)
        conn.set_option(ldap.OPT_REFERRALS, 0)
        conn.set_option(ldap.OPT_NETWORK_TIMEOUT, self.config.timeout)
        conn.protocol_version = ldap.VERSION3
        conn.simple_bind_s(self.config.bind_dn, self.config.bind_password)
        return conn

    def check(self) -> None:
        try:
            conn = self._connect()
        except ldap.LDAPError as e:
            raise DirectorySourceError(
                f"Directory {self.config.uri} is unreachable: {e}"
            ) from e
        conn.unbind_s()
        logger.info("Directory %s is reachable", self.config.uri)

    def fetch_accounts(self) -> List[AccountRecord]:
        try:
            conn = self._connect()
        except ldap.LDAPError as e:
            raise DirectorySourceError(
                f"Directory {self.config.uri} is unreachable: {e}"
            ) from e

        try:
            entries = self._paged_search(conn)
        except ldap.LDAPError as e:
            raise DirectorySourceError(
                f"Directory query failed on {self.config.base_dn}: {e}"
            ) from e
        finally:
            conn.unbind_s()

        accounts = []
        for dn, attrs in entries:
            # referrals come back without a dn
            if dn is None:
                continue
            account = entry_to_account(attrs)
            if account is None:
                logger.warning("Skipping entry without account name: %s", dn)
                continue
            accounts.append(account)

        logger.info("Fetched %d accounts from %s", len(accounts), self.config.base_dn)
        return accounts

    def _paged_search(self, conn) -> list:
        control = SimplePagedResultsControl(True, size=PAGE_SIZE, cookie="")
        entries = []
        while True:
            msgid = conn.search_ext(
                self.config.base_dn,
                ldap.SCOPE_SUBTREE,
                self.config.search_filter,
                ATTRIBUTES,
                serverctrls=[control],
            )
            _, data, _, server_controls = conn.result3(msgid)
            entries.extend(data)

            cookie = None
            for ctrl in server_controls:
                if ctrl.controlType == SimplePagedResultsControl.controlType:
                    cookie = ctrl.cookie
            if not cookie:
                return entries
            control.cookie = cookie
