"""Directory account sources

The LDAP source lives in ``ldap_source`` and is imported on demand, since it
needs python-ldap.
"""

from .base import DirectorySource, DirectorySourceError

__all__ = ["DirectorySource", "DirectorySourceError"]
