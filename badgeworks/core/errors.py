class BadgeworksError(Exception):
    """Base de los errores propios de badgeworks."""


class ProviderError(BadgeworksError):
    """Fallo (o falta de config) de un proveedor de texto/imagen."""


class ImageProcessingError(BadgeworksError):
    """La imagen generada no se pudo descargar o decodificar."""


class StorageError(BadgeworksError):
    """No se pudo escribir/leer la imagen procesada en el almacenamiento."""
