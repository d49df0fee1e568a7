"""
Configuration management for the troop, spell and hero name catalog.
"""

import yaml
from typing import Dict, List, Optional, Set
from pathlib import Path
from pydantic import BaseModel, Field


class NameCatalog(BaseModel):
    """Model for the catalog of every valid name, per category and village."""
    categories: Dict[str, Dict[str, List[str]]] = Field(default_factory=dict)

    def list_categories(self) -> List[str]:
        """Get list of available category names."""
        return list(self.categories.keys())

    def get_villages(self, category: str) -> Dict[str, List[str]]:
        """Get names of a category grouped by village."""
        if category not in self.categories:
            available = self.list_categories()
            raise ValueError(f"Unknown category '{category}'. Available: {available}")
        return self.categories[category]

    def get_names(self, category: str, village: Optional[str] = None) -> List[str]:
        """
        Get known names for a category.

        Args:
            category: Category name (e.g., 'troops')
            village: Restrict to one village ('home' or 'builderBase')

        Returns:
            Names in catalog order, without duplicates
        """
        villages = self.get_villages(category)

        if village is not None:
            if village not in villages:
                available = list(villages.keys())
                raise ValueError(f"Unknown village '{village}' for '{category}'. Available: {available}")
            return list(villages[village])

        names = []
        for village_names in villages.values():
            for name in village_names:
                if name not in names:
                    names.append(name)
        return names

    def name_set(self, category: str) -> Set[str]:
        """Get every name of a category across all villages."""
        return set(self.get_names(category))

    def contains(self, category: str, name: str) -> bool:
        """Check whether a name is known for the category in any village."""
        return name in self.name_set(category)


class Config:
    """Configuration loader and validator for the YAML name catalog."""

    def __init__(self, config_path: Optional[str] = None):
        if config_path is None:
            config_path = Path(__file__).parent / "catalog.yaml"

        self.config_path = Path(config_path)
        self._catalog = NameCatalog()
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate YAML configuration."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as file:
            raw_config = yaml.safe_load(file) or {}

        self._catalog = NameCatalog(**raw_config)

    def get_catalog(self) -> NameCatalog:
        """Get the validated catalog."""
        return self._catalog

    def list_categories(self) -> List[str]:
        """Get list of available category names."""
        return self._catalog.list_categories()

    def get_names(self, category: str, village: Optional[str] = None) -> List[str]:
        """Get known names for a category, optionally for one village."""
        return self._catalog.get_names(category, village)
