"""METS 1.x header and file section.

METS attributes are unqualified while its elements live in the METS
namespace. Descriptive, administrative and structural sections are not
bound and are skipped when reading.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from .. import xsdt
from ..binding import attribute, chardata, element, group, record
from ..namespaces import METS_NS
from .xlink import SimpleLink


class AgentRole(StrEnum):
    CREATOR = "CREATOR"
    EDITOR = "EDITOR"
    ARCHIVIST = "ARCHIVIST"
    PRESERVATION = "PRESERVATION"
    DISSEMINATOR = "DISSEMINATOR"
    CUSTODIAN = "CUSTODIAN"
    IPOWNER = "IPOWNER"
    OTHER = "OTHER"


class AgentType(StrEnum):
    INDIVIDUAL = "INDIVIDUAL"
    ORGANIZATION = "ORGANIZATION"
    OTHER = "OTHER"


class LocType(StrEnum):
    ARK = "ARK"
    URN = "URN"
    URL = "URL"
    PURL = "PURL"
    HANDLE = "HANDLE"
    DOI = "DOI"
    OTHER = "OTHER"


class ChecksumType(StrEnum):
    ADLER_32 = "Adler-32"
    CRC32 = "CRC32"
    HAVAL = "HAVAL"
    MD5 = "MD5"
    MNP = "MNP"
    SHA_1 = "SHA-1"
    SHA_256 = "SHA-256"
    SHA_384 = "SHA-384"
    SHA_512 = "SHA-512"
    TIGER = "TIGER"
    WHIRLPOOL = "WHIRLPOOL"


class BEType(StrEnum):
    """Syntax of the BEGIN and END attributes of files and streams."""

    BYTE = "BYTE"
    IDREF = "IDREF"
    SMIL = "SMIL"
    MIDI = "MIDI"
    SMPTE_25 = "SMPTE-25"
    SMPTE_24 = "SMPTE-24"
    SMPTE_DF30 = "SMPTE-DF30"
    SMPTE_NDF30 = "SMPTE-NDF30"
    SMPTE_DF29_97 = "SMPTE-DF29.97"
    SMPTE_NDF29_97 = "SMPTE-NDF29.97"
    TIME = "TIME"
    TCF = "TCF"
    XPTR = "XPTR"


class TransformType(StrEnum):
    DECOMPRESSION = "decompression"
    DECRYPTION = "decryption"


@record(METS_NS, "agent")
class Agent:
    name: str = element(METS_NS, "name", xsdt.STRING)
    notes: list[str] = element(METS_NS, "note", xsdt.STRING)
    id: str | None = attribute(None, "ID", xsdt.ID)
    role: AgentRole | None = attribute(None, "ROLE", xsdt.Enumeration(AgentRole), required=True)
    other_role: str | None = attribute(None, "OTHERROLE")
    type: AgentType | None = attribute(None, "TYPE", xsdt.Enumeration(AgentType))
    other_type: str | None = attribute(None, "OTHERTYPE")


@record(METS_NS, "altRecordID")
class AltRecordID:
    value: str | None = chardata()
    id: str | None = attribute(None, "ID", xsdt.ID)
    type: str | None = attribute(None, "TYPE")


@record(METS_NS, "metsDocumentID")
class MetsDocumentID:
    value: str | None = chardata()
    id: str | None = attribute(None, "ID", xsdt.ID)
    type: str | None = attribute(None, "TYPE")


@record(METS_NS, "metsHdr")
class MetsHdr:
    agents: list[Agent] = element(METS_NS, "agent")
    alt_record_ids: list[AltRecordID] = element(METS_NS, "altRecordID")
    mets_document_id: MetsDocumentID | None = element(METS_NS, "metsDocumentID")
    id: str | None = attribute(None, "ID", xsdt.ID)
    adm_id: list[str] | None = attribute(None, "ADMID", xsdt.IDREFS)
    create_date: datetime | None = attribute(None, "CREATEDATE", xsdt.DATE_TIME)
    last_mod_date: datetime | None = attribute(None, "LASTMODDATE", xsdt.DATE_TIME)
    record_status: str | None = attribute(None, "RECORDSTATUS")


@record
class FileCore:
    mime_type: str | None = attribute(None, "MIMETYPE")
    size: int | None = attribute(None, "SIZE", xsdt.LONG)
    created: datetime | None = attribute(None, "CREATED", xsdt.DATE_TIME)
    checksum: str | None = attribute(None, "CHECKSUM")
    checksum_type: ChecksumType | None = attribute(
        None, "CHECKSUMTYPE", xsdt.Enumeration(ChecksumType)
    )


@record
class Location:
    loc_type: LocType | None = attribute(None, "LOCTYPE", xsdt.Enumeration(LocType), required=True)
    other_loc_type: str | None = attribute(None, "OTHERLOCTYPE")


@record(METS_NS, "FLocat")
class FLocat:
    location: Location = group(Location)
    link: SimpleLink = group(SimpleLink)
    id: str | None = attribute(None, "ID", xsdt.ID)
    use: str | None = attribute(None, "USE")


@record(METS_NS, "xmlData")
class XMLData:
    """Wrapper for embedded XML; its content is arbitrary and not bound."""


@record(METS_NS, "FContent")
class FContent:
    bin_data: bytes | None = element(METS_NS, "binData", xsdt.BASE64_BINARY)
    xml_data: XMLData | None = element(METS_NS, "xmlData")
    id: str | None = attribute(None, "ID", xsdt.ID)
    use: str | None = attribute(None, "USE")


@record(METS_NS, "stream")
class Stream:
    id: str | None = attribute(None, "ID", xsdt.ID)
    stream_type: str | None = attribute(None, "streamType")
    owner_id: str | None = attribute(None, "OWNERID")
    adm_id: list[str] | None = attribute(None, "ADMID", xsdt.IDREFS)
    dmd_id: list[str] | None = attribute(None, "DMDID", xsdt.IDREFS)
    begin: str | None = attribute(None, "BEGIN")
    end: str | None = attribute(None, "END")
    be_type: BEType | None = attribute(None, "BETYPE", xsdt.Enumeration(BEType))


@record(METS_NS, "transformFile")
class TransformFile:
    """Instructions to unpack a compressed or encrypted file."""

    id: str | None = attribute(None, "ID", xsdt.ID)
    transform_type: TransformType | None = attribute(
        None, "TRANSFORMTYPE", xsdt.Enumeration(TransformType), required=True
    )
    transform_algorithm: str | None = attribute(None, "TRANSFORMALGORITHM", required=True)
    transform_key: str | None = attribute(None, "TRANSFORMKEY")
    transform_behavior: str | None = attribute(None, "TRANSFORMBEHAVIOR", xsdt.IDREF)
    transform_order: int | None = attribute(
        None, "TRANSFORMORDER", xsdt.POSITIVE_INTEGER, required=True
    )


@record(METS_NS, "file")
class File:
    flocats: list[FLocat] = element(METS_NS, "FLocat")
    fcontent: FContent | None = element(METS_NS, "FContent")
    streams: list[Stream] = element(METS_NS, "stream")
    transform_files: list[TransformFile] = element(METS_NS, "transformFile")
    files: list[File] = element(METS_NS, "file")
    id: str | None = attribute(None, "ID", xsdt.ID, required=True)
    seq: int | None = attribute(None, "SEQ", xsdt.INT)
    core: FileCore = group(FileCore)
    owner_id: str | None = attribute(None, "OWNERID")
    adm_id: list[str] | None = attribute(None, "ADMID", xsdt.IDREFS)
    dmd_id: list[str] | None = attribute(None, "DMDID", xsdt.IDREFS)
    group_id: str | None = attribute(None, "GROUPID")
    use: str | None = attribute(None, "USE")
    begin: str | None = attribute(None, "BEGIN")
    end: str | None = attribute(None, "END")
    be_type: BEType | None = attribute(None, "BETYPE", xsdt.Enumeration(BEType))


@record(METS_NS, "fileGrp")
class FileGrp:
    file_grps: list[FileGrp] = element(METS_NS, "fileGrp")
    files: list[File] = element(METS_NS, "file")
    id: str | None = attribute(None, "ID", xsdt.ID)
    vers_date: datetime | None = attribute(None, "VERSDATE", xsdt.DATE_TIME)
    adm_id: list[str] | None = attribute(None, "ADMID", xsdt.IDREFS)
    use: str | None = attribute(None, "USE")

    def iter_files(self):
        """Yield every file of this group and its nested groups, depth first."""
        for file in self.files:
            yield file
            yield from _nested_files(file)
        for grp in self.file_grps:
            yield from grp.iter_files()


def _nested_files(file: File):
    for child in file.files:
        yield child
        yield from _nested_files(child)


@record(METS_NS, "fileSec")
class FileSec:
    file_grps: list[FileGrp] = element(METS_NS, "fileGrp")
    id: str | None = attribute(None, "ID", xsdt.ID)


@record(METS_NS, "mets")
class Mets:
    mets_hdr: MetsHdr | None = element(METS_NS, "metsHdr")
    file_sec: FileSec | None = element(METS_NS, "fileSec")
    id: str | None = attribute(None, "ID", xsdt.ID)
    obj_id: str | None = attribute(None, "OBJID")
    label: str | None = attribute(None, "LABEL")
    type: str | None = attribute(None, "TYPE")
    profile: str | None = attribute(None, "PROFILE")


__all__ = [
    "Agent",
    "AgentRole",
    "AgentType",
    "AltRecordID",
    "BEType",
    "ChecksumType",
    "FContent",
    "FLocat",
    "File",
    "FileCore",
    "FileGrp",
    "FileSec",
    "LocType",
    "Location",
    "Mets",
    "MetsDocumentID",
    "MetsHdr",
    "Stream",
    "TransformFile",
    "TransformType",
    "XMLData",
]
