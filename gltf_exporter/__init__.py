__all__ = [
    "export_gltf",
    "build_gltf",
    "build_document",
    "ExportOptions",
    "BlobAccumulator",
    "NodeProjector",
    "Store",
    "Group",
    "GroupKind",
    "Attribute",
    "load_store",
    "Severity",
    "LoggingReporter",
    "CallbackReporter",
]

from gltf_exporter.blobs import BlobAccumulator
from gltf_exporter.exporter import ExportOptions, build_document, build_gltf, export_gltf
from gltf_exporter.logger import CallbackReporter, LoggingReporter, Severity
from gltf_exporter.nodes import NodeProjector
from gltf_exporter.store import Attribute, Group, GroupKind, Store, load_store
