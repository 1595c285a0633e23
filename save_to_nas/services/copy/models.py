from dataclasses import dataclass


@dataclass
class CopyResult:
    success: bool
    source: str
    destination: str
    is_directory: bool

    def get_summary(self) -> str:
        """Get a human-readable summary of the copy operation."""
        kind = "directory" if self.is_directory else "file"
        return f"Copied {kind} {self.source} -> {self.destination}"
