# save_to_nas/core/exceptions.py


class NasError(Exception):
    """Base exception for all NAS operation failures."""
    pass


class DiscoveryError(NasError):
    """Raised when the NAS export listing cannot be retrieved."""
    def __init__(self, message: str):
        self.underlying_message = message
        super().__init__(f"Failed to discover NFS exports: {message}")


class ShareNotFoundError(NasError):
    """Raised when no export on the NAS matches the requested share name."""
    def __init__(self, share_name: str):
        self.share_name = share_name
        super().__init__(
            f'Share "{share_name}" not found on NAS. '
            f'Use action "list" to see available shares.'
        )


class MountError(NasError):
    """Raised when a share could not be mounted."""
    def __init__(self, message: str):
        self.underlying_message = message
        super().__init__(f"Failed to mount share: {message}")


class SourceNotFoundError(NasError):
    """Raised when the local path to save does not exist."""
    def __init__(self, source_path: str):
        self.source_path = source_path
        super().__init__(f"Source path does not exist: {source_path}")


class CopyError(NasError):
    """Raised when copying onto the NAS fails."""
    def __init__(self, message: str):
        self.underlying_message = message
        super().__init__(f"Failed to copy: {message}")


class ValidationError(NasError):
    """Raised when a request is missing required input."""
    pass
