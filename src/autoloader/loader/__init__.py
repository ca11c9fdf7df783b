"""Descriptor discovery for the autoloader runtime.

Usage::

    from autoloader.loader import Loader

    loader = Loader(dirs=["/app/modules"])
    descriptors = loader.discover()
"""

from __future__ import annotations

from autoloader.loader.entry_point import load_descriptor
from autoloader.loader.loader import Loader
from autoloader.loader.scanner import match_descriptor_name, scan_directory
from autoloader.loader.types import DiscoveredFile
from autoloader.loader.validation import DescriptorHeader, descriptor_field, validate_descriptor

__all__ = [
    "DescriptorHeader",
    "DiscoveredFile",
    "Loader",
    "descriptor_field",
    "load_descriptor",
    "match_descriptor_name",
    "scan_directory",
    "validate_descriptor",
]
