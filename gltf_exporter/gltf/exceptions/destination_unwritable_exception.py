from gltf_exporter.gltf.exceptions.export_exception import ExportException


class DestinationUnwritableException(ExportException):
    pass
