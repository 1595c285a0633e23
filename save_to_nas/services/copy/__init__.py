from .file_copier import FileCopier
from .models import CopyResult

__all__ = ["FileCopier", "CopyResult"]
