__all__ = [
    "ExportException",
    "DestinationUnwritableException",
    "WriteFailureException",
    "SizeLimitExceededException",
    "UnexpectedGroupKindException",
]

from gltf_exporter.gltf.exceptions.export_exception import ExportException
from gltf_exporter.gltf.exceptions.destination_unwritable_exception import (
    DestinationUnwritableException,
)
from gltf_exporter.gltf.exceptions.write_failure_exception import (
    WriteFailureException,
)
from gltf_exporter.gltf.exceptions.size_limit_exceeded_exception import (
    SizeLimitExceededException,
)
from gltf_exporter.gltf.exceptions.unexpected_group_kind_exception import (
    UnexpectedGroupKindException,
)
