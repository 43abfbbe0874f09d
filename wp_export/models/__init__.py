from .config import ExportConfig, load_config
from .post import ImageRecord, PostRecord

__all__ = ["ExportConfig", "ImageRecord", "PostRecord", "load_config"]
