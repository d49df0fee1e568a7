"""
Abstract base class for read-only views over decoded API documents.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Type
import logging

from pydantic import BaseModel, ValidationError

from ..config import Config, NameCatalog
from ..exceptions import DocumentShapeError
from ..utils.document import get_field, get_first_field

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """Abstract base class for views that project fields out of one document."""

    def __init__(self, catalog: Optional[NameCatalog] = None):
        self.catalog = catalog if catalog is not None else Config().get_catalog()

    @property
    @abstractmethod
    def document(self) -> Optional[Dict[str, Any]]:
        """The document fields are read from."""
        pass

    def _get(self, path: str, expected_type: Any = object) -> Any:
        """Read one field of the current document with a type check."""
        return get_field(self.document, path, expected_type)

    def _get_first(self, paths: Sequence[str], expected_type: Any = object) -> Any:
        """Read the first present of several alternative fields."""
        return get_first_field(self.document, paths, expected_type)

    @staticmethod
    def _to_model(model: Type[BaseModel], field: str, value: Any) -> Any:
        """
        Validate a raw document value into a pydantic model.

        Args:
            model: Model class to build
            field: Field path the value came from, used in errors
            value: Raw value taken from the document

        Returns:
            Model instance
        """
        try:
            return model.model_validate(value)
        except ValidationError as e:
            logger.debug(f"Validation of '{field}' as {model.__name__} failed: {e}")
            raise DocumentShapeError(field, f"not a valid {model.__name__}: {e}", value) from e

    def _to_models(self, model: Type[BaseModel], field: str, values: List[Any]) -> List[Any]:
        return [
            self._to_model(model, f"{field}[{index}]", value)
            for index, value in enumerate(values)
        ]
