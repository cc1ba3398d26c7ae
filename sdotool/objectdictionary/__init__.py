"""
Object Dictionary module
"""
from types import MappingProxyType
from typing import Dict, Iterator, Mapping as TMapping, Optional, TextIO, Union
from collections.abc import Mapping

from sdotool.objectdictionary.datatypes import *
from sdotool.objectdictionary.exceptions import (
    EdsParseError,
    MissingDeviceTypeError,
    MissingIdentityError,
    ObjectDictionaryError,
)
from sdotool.utils import pretty_index

TSource = Union[str, TextIO]


def import_od(source: TSource) -> "ObjectDictionary":
    """Parse an EDS or DCF file.

    :param source:
        Path to object dictionary file or a file like object.

    :return:
        An Object Dictionary instance.
    """
    if hasattr(source, "read"):
        filename = getattr(source, "name", "od.eds")
    else:
        filename = str(source)
    if not isinstance(filename, str):
        filename = "od.eds"
    suffix = filename[filename.rfind("."):].lower()
    if suffix in (".eds", ".dcf", ".ini"):
        from sdotool.objectdictionary import eds
        return eds.import_eds(source)
    else:
        raise NotImplementedError("No support for this format")


class ObjectDictionary(Mapping):
    """Read-only representation of a parsed object dictionary.

    Objects are looked up by their 16-bit index.
    """

    def __init__(self, device_type: int, vendor_id: int = 0,
                 objects: Optional[Dict[int, "ObjectEntry"]] = None):
        #: Device Type read from object 0x1000
        self.device_type = device_type
        #: Vendor-ID read from the Identity object 0x1018
        self.vendor_id = vendor_id
        self._indices = dict(objects or {})
        #: Read-only view of all objects keyed by index
        self.objects: TMapping[int, ObjectEntry] = MappingProxyType(self._indices)

    def __getitem__(self, index: int) -> "ObjectEntry":
        item = self._indices.get(index)
        if item is None:
            raise KeyError("%s was not found in Object Dictionary" % (
                pretty_index(index) if isinstance(index, int) else repr(index)))
        return item

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._indices))

    def __len__(self) -> int:
        return len(self._indices)

    def __contains__(self, index) -> bool:
        return index in self._indices

    def __repr__(self) -> str:
        return "<%s device_type=0x%08X vendor_id=0x%08X with %d objects>" % (
            type(self).__qualname__, self.device_type, self.vendor_id,
            len(self))

    def lookup_object(self, index: int) -> Optional["ObjectEntry"]:
        """Get the object at the specified index.

        :return: ObjectEntry if found, else `None`
        """
        return self._indices.get(index)


class ObjectEntry(Mapping):
    """One object of the dictionary, holding its sub-objects by sub-index."""

    def __init__(self, index: int, name: str = "Unnamed",
                 data_type: str = "0x0005", access_rights: str = "ro"):
        #: 16-bit address of the object
        self.index = index
        #: Name of the object
        self.name = name
        #: Data type code as written in the EDS, e.g. "0x0007"
        self.data_type = data_type
        #: Access type, e.g. "rw", "ro", "wo" or "const"
        self.access_rights = access_rights
        self._subindices: Dict[int, SubObjectEntry] = {}
        #: Read-only view of the sub-objects keyed by sub-index
        self.sub_objects: TMapping[int, SubObjectEntry] = MappingProxyType(
            self._subindices)

    def __getitem__(self, subindex: int) -> "SubObjectEntry":
        item = self._subindices.get(subindex)
        if item is None:
            raise KeyError("Subindex %s was not found" % subindex)
        return item

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._subindices))

    def __len__(self) -> int:
        return len(self._subindices)

    def __contains__(self, subindex) -> bool:
        return subindex in self._subindices

    def __repr__(self) -> str:
        return "<%s %r at %s>" % (
            type(self).__qualname__, self.name, pretty_index(self.index))

    def _add_member(self, sub_object: "SubObjectEntry") -> None:
        self._subindices[sub_object.subindex] = sub_object

    @property
    def writable(self) -> bool:
        return "w" in self.access_rights

    @property
    def readable(self) -> bool:
        return "r" in self.access_rights


class SubObjectEntry:
    """One sub-index under an object."""

    def __init__(self, index: int, subindex: int,
                 value: Optional[str] = None,
                 default_value: Optional[str] = None,
                 data_type: str = "0x0005", access: str = "rw"):
        #: 16-bit address of the owning object
        self.index = index
        #: 8-bit sub-index
        self.subindex = subindex
        #: Current value text, if declared
        self.value = value
        #: Default value text, if declared
        self.default_value = default_value
        self.data_type = data_type
        self.access = access

    def __repr__(self) -> str:
        return "<%s at %s>" % (
            type(self).__qualname__, pretty_index(self.index, self.subindex))

