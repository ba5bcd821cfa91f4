from __future__ import annotations


class PodkitError(Exception):
    pass


class SyncMapError(PodkitError):
    """The local-to-remote sync map for an artifact could not be resolved."""


class ImageConfigError(PodkitError):
    """An image's container configuration could not be retrieved."""


class ManifestDecodeError(PodkitError):
    pass


class ManifestEncodeError(PodkitError):
    pass
