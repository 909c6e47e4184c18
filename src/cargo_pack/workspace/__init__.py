from .discovery import Package, Workspace, find_root_manifest_for_wd
from .resolve import resolve_package

__all__ = ["Package", "Workspace", "find_root_manifest_for_wd", "resolve_package"]
