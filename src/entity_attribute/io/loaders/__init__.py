from .attribute_loader import load_attributes
from .errors import LoaderError
from .file_spec import AttributeEntrySpec, AttributeFileSpec

__all__ = ["AttributeEntrySpec", "AttributeFileSpec", "LoaderError", "load_attributes"]
