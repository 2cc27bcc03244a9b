"""
Container sniffing shared by the decoders.

Both supported spreadsheet and word-processor formats come in two
containers: the modern OOXML ZIP package (.xlsx, .docx) and the legacy
OLE2 compound file (.xls, .doc). The leading bytes tell them apart.
"""

from __future__ import annotations

from typing import Optional

ZIP_MAGIC = b"PK\x03\x04"
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

ZIP = "zip"
OLE2 = "ole2"


def sniff_container(data: bytes) -> Optional[str]:
    """Return ZIP, OLE2 or None for anything else."""
    if data.startswith(ZIP_MAGIC):
        return ZIP
    if data.startswith(OLE2_MAGIC):
        return OLE2
    return None
