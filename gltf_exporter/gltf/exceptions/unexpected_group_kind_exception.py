from gltf_exporter.gltf.exceptions.export_exception import ExportException


class UnexpectedGroupKindException(ExportException):
    pass
