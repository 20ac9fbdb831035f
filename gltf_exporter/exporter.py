import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Iterable, TextIO

import orjson

from gltf_exporter.blobs import BlobAccumulator
from gltf_exporter.gltf import BIN_CHUNK_TYPE, JSON_CHUNK_TYPE, Chunk, GlTF
from gltf_exporter.gltf.chunk import Buffer
from gltf_exporter.gltf.exceptions import ExportException
from gltf_exporter.logger import Reporter, Severity, as_reporter
from gltf_exporter.nodes import NodeProjector
from gltf_exporter.store import Group

PLACEHOLDER_ARRAYS = ("meshes", "accessors", "bufferViews", "buffers")

log = logging.getLogger(__name__)


@dataclass
class ExportOptions:
    include_attributes: bool = True
    # Unpadded chunks and the fixed placeholder total length
    reference_layout: bool = False
    # Pretty-printed document goes here when set
    debug_stream: TextIO | None = None


@dataclass
class ExportContext:
    options: ExportOptions
    projector: NodeProjector
    blobs: BlobAccumulator = field(default_factory=BlobAccumulator)
    root_nodes: list[int] = field(default_factory=list)

    @staticmethod
    def create(options: ExportOptions) -> "ExportContext":
        return ExportContext(options, NodeProjector(options.include_attributes))

    @property
    def nodes(self) -> list[dict]:
        return self.projector.nodes


def export_gltf(
    store: Iterable[Group],
    logger: Reporter | Callable[..., None] | None,
    path: os.PathLike | str,
    options: ExportOptions | None = None,
    *,
    payloads: Iterable[tuple[Buffer, bool]] = (),
) -> bool:
    """
    Exports the scene tree held by `store` into a binary glTF file at `path`.

    :param store: Store (or any iterable) of File groups
    :param logger: a `Reporter` or a printf-style ``callback(severity, fmt, *args)``
    :param path: destination file path
    :param options: export options, defaults are used when omitted
    :param payloads: ``(data, copy)`` pairs recorded into the BIN chunk in order
    :return: True only if the whole file was written
    """

    reporter = as_reporter(logger)
    options = options or ExportOptions()

    try:
        gltf, document = build_gltf(store, options, payloads=payloads)
        gltf.write(path)
    except ExportException as exception:
        if exception.path is None:
            exception.path = path

        reporter.report(Severity.ERROR, exception.describe())
        return False

    if options.debug_stream is not None:
        _dump_document(document, options.debug_stream)

    return True


def build_gltf(
    store: Iterable[Group],
    options: ExportOptions,
    *,
    payloads: Iterable[tuple[Buffer, bool]] = (),
) -> tuple[GlTF, dict]:
    context = ExportContext.create(options)
    context.root_nodes = context.projector.process_roots(store)

    for data, copy in payloads:
        context.blobs.record(data, copy)

    document = build_document(context.nodes, context.root_nodes)
    log.debug(
        "Assembled %d nodes (%d roots), %d bytes of binary data",
        len(context.nodes),
        len(context.root_nodes),
        context.blobs.byte_length,
    )

    json_chunk = Chunk(JSON_CHUNK_TYPE, orjson.dumps(document))
    bin_chunk = Chunk(BIN_CHUNK_TYPE, *(blob.data for blob in context.blobs))

    gltf = GlTF(json_chunk, bin_chunk, reference_layout=options.reference_layout)
    return gltf, document


def build_document(nodes: list[dict], root_nodes: list[int]) -> dict:
    document: dict = {
        "asset": {},
        "scene": 0,
        "scenes": [{"nodes": list(root_nodes)}],
        "nodes": nodes,
    }

    for key in PLACEHOLDER_ARRAYS:
        document[key] = []

    return document


def _dump_document(document: dict, stream: TextIO) -> None:
    stream.write(orjson.dumps(document, option=orjson.OPT_INDENT_2).decode("utf-8"))
    stream.write("\n")
    stream.flush()
